"""Scenario tests for the raw finger environment."""

from __future__ import annotations

from pathlib import Path

import mujoco
import numpy as np
import pytest

from mujoco_finger.envs import FingerEnv, StepResult
from mujoco_finger.errors import ConfigurationError, InitializationExhaustedError
from mujoco_finger.robots import FINGER_MODEL_PATH


TASKS = ["spin", "turn_easy", "turn_hard"]


def _name2id(env: FingerEnv, objtype: mujoco.mjtObj, name: str) -> int:
    return mujoco.mj_name2id(env.model, objtype, name)


@pytest.mark.parametrize("task_name", TASKS)
def test_construction_succeeds_for_known_tasks(task_name: str) -> None:
    env = FingerEnv(task_name=task_name, seed=0)
    assert env.action_dim == 2
    env.close()


@pytest.mark.parametrize("task_name", ["", "spinning", "TURN_EASY", "reach"])
def test_construction_fails_for_unknown_tasks(task_name: str) -> None:
    with pytest.raises(ConfigurationError):
        FingerEnv(task_name=task_name)


@pytest.mark.parametrize(
    "kwargs",
    [{"frame_skip": 0}, {"max_episode_steps": 0}, {"max_init_attempts": -1}],
)
def test_construction_rejects_non_positive_counts(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        FingerEnv(task_name="spin", **kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [{"frame_skip": 2.7}, {"max_episode_steps": "10"}, {"max_init_attempts": True}],
)
def test_construction_rejects_non_integer_counts(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        FingerEnv(task_name="spin", **kwargs)


def test_construction_accepts_numpy_integer_counts() -> None:
    env = FingerEnv(task_name="spin", frame_skip=np.int64(3))
    assert env.frame_skip == 3
    assert type(env.frame_skip) is int
    env.close()


@pytest.mark.parametrize("task_name", TASKS)
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_reset_leaves_no_contacts(task_name: str, seed: int) -> None:
    env = FingerEnv(task_name=task_name)
    first = env.reset(seed=seed)
    assert isinstance(first, StepResult)
    assert env.data.ncon == 0
    assert first.reward == 0.0
    assert first.discount == 1.0
    assert not first.done
    env.close()


@pytest.mark.parametrize("task_name", TASKS)
def test_reset_observation_shapes(task_name: str) -> None:
    env = FingerEnv(task_name=task_name, seed=0)
    obs = env.reset().obs
    assert set(obs) == set(env.observation_shapes)
    for key, shape in env.observation_shapes.items():
        assert np.shape(obs[key]) == shape
        assert np.all(np.isfinite(obs[key]))
    assert np.all(obs["touch"] >= 0.0)
    env.close()


def test_spin_never_exposes_target_fields() -> None:
    env = FingerEnv(task_name="spin", seed=0, diagnostics=True)
    first = env.reset()
    step = env.step(np.zeros(2))
    for res in (first, step):
        assert "target_position" not in res.obs
        assert "dist_to_target" not in res.obs
        assert "target" not in res.info
    env.close()


def test_spin_reset_hides_markers_and_sets_damping() -> None:
    env = FingerEnv(task_name="spin", seed=0)
    env.reset()
    target_site = _name2id(env, mujoco.mjtObj.mjOBJ_SITE, "target")
    tip_site = _name2id(env, mujoco.mjtObj.mjOBJ_SITE, "tip")
    hinge = _name2id(env, mujoco.mjtObj.mjOBJ_JOINT, "hinge")
    assert env.model.site_rgba[target_site, 3] == 0.0
    assert env.model.site_rgba[tip_site, 3] == 0.0
    assert env.model.dof_damping[env.model.jnt_dofadr[hinge]] == pytest.approx(0.03)
    env.close()


@pytest.mark.parametrize("seed", [0, 7, 123])
def test_turn_easy_target_matches_seeded_stream(seed: int) -> None:
    env = FingerEnv(task_name="turn_easy", diagnostics=True)
    first = env.reset(seed=seed)

    # The bearing is the first draw of the episode's random stream.
    angle = np.random.default_rng(seed).uniform(-np.pi, np.pi)
    hinge = _name2id(env, mujoco.mjtObj.mjOBJ_JOINT, "hinge")
    cap1 = _name2id(env, mujoco.mjtObj.mjOBJ_GEOM, "cap1")
    anchor = env.data.xanchor[hinge][[0, 2]]
    radius = float(np.sum(env.model.geom_size[cap1]))
    assert radius == pytest.approx(0.13)

    offset = radius * np.array([np.sin(angle), np.cos(angle)])
    np.testing.assert_allclose(first.info["target"], anchor + offset, atol=1e-12)
    assert np.linalg.norm(first.info["target"] - anchor) == pytest.approx(radius)

    target_site = _name2id(env, mujoco.mjtObj.mjOBJ_SITE, "target")
    np.testing.assert_allclose(
        env.model.site_pos[target_site][[0, 2]], first.info["target"], atol=1e-12
    )
    assert env.model.site_size[target_site, 0] == pytest.approx(0.07)
    assert env.target_radius == pytest.approx(0.07)

    # The spinner body sits on the hinge anchor, so the observed target is the offset.
    np.testing.assert_allclose(first.obs["target_position"], offset, atol=1e-9)
    env.close()


def test_turn_hard_uses_small_radius() -> None:
    env = FingerEnv(task_name="turn_hard", seed=0)
    env.reset()
    assert env.target_radius == pytest.approx(0.03)
    env.close()


@pytest.mark.parametrize("task_name", ["turn_easy", "turn_hard"])
def test_dist_to_target_matches_observed_positions(task_name: str) -> None:
    env = FingerEnv(task_name=task_name, seed=5)
    res = env.reset()
    for _ in range(3):
        res = env.step(env.sample_action())
    tip = res.obs["position"][2:]
    expected = np.linalg.norm(res.obs["target_position"] - tip) - env.target_radius
    assert float(res.obs["dist_to_target"]) == pytest.approx(expected)
    assert res.reward == float(expected <= 0.0)
    env.close()


def test_seeded_resets_are_reproducible() -> None:
    a = FingerEnv(task_name="turn_hard", diagnostics=True)
    b = FingerEnv(task_name="turn_hard", diagnostics=True)
    ra = a.reset(seed=42)
    rb = b.reset(seed=42)
    np.testing.assert_allclose(ra.info["qpos0"], rb.info["qpos0"])
    np.testing.assert_allclose(ra.info["target"], rb.info["target"])
    for key in ra.obs:
        np.testing.assert_allclose(ra.obs[key], rb.obs[key])
    a.close()
    b.close()


def test_instances_do_not_share_random_streams() -> None:
    a = FingerEnv(task_name="turn_easy", seed=1, diagnostics=True)
    b = FingerEnv(task_name="turn_easy", seed=2, diagnostics=True)
    assert not np.allclose(a.reset().info["target"], b.reset().info["target"])
    a.close()
    b.close()


@pytest.mark.parametrize("task_name", TASKS)
def test_zero_action_steps_are_smooth(task_name: str) -> None:
    env = FingerEnv(task_name=task_name, seed=3)
    prev = env.reset()
    for _ in range(20):
        res = env.step(np.zeros(2))
        for value in res.obs.values():
            assert np.all(np.isfinite(value))
        # Starting at rest with no gravity and no command, nothing accelerates.
        np.testing.assert_allclose(res.obs["velocity"], 0.0, atol=1e-6)
        if "dist_to_target" in res.obs:
            jump = abs(float(res.obs["dist_to_target"]) - float(prev.obs["dist_to_target"]))
            assert jump < 1e-3
        prev = res
    env.close()


@pytest.mark.parametrize("task_name", TASKS)
def test_zero_action_coasting_after_drive_is_smooth(task_name: str) -> None:
    env = FingerEnv(task_name=task_name, seed=0)
    env.reset()
    for _ in range(10):
        prev = env.step(np.ones(2))
    start_speed = float(np.linalg.norm(prev.obs["velocity"]))
    assert start_speed > 1e-3

    for _ in range(50):
        res = env.step(np.zeros(2))
        for value in res.obs.values():
            assert np.all(np.isfinite(value))
        if "dist_to_target" in res.obs:
            jump = abs(float(res.obs["dist_to_target"]) - float(prev.obs["dist_to_target"]))
            assert jump < 0.05
        prev = res
    # No command and no gravity: damping bleeds off the momentum from the drive.
    assert float(np.linalg.norm(prev.obs["velocity"])) < start_speed
    env.close()


def test_task_never_terminates_episode() -> None:
    env = FingerEnv(task_name="turn_easy", seed=0, max_episode_steps=25)
    env.reset()
    dones = []
    for _ in range(60):
        res = env.step(env.sample_action())
        assert env.should_terminate_episode() is False
        assert res.discount == 1.0
        dones.append(res.done)
    assert dones.index(True) == 24
    assert not any(dones[:24])
    env.close()


def test_frame_skip_advances_physics_time() -> None:
    env = FingerEnv(task_name="spin", seed=0, frame_skip=3)
    env.reset()
    t0 = env.data.time
    env.step(np.zeros(2))
    assert env.data.time == pytest.approx(t0 + 3 * env.model.opt.timestep)
    env.close()


def test_step_rejects_bad_action_shape() -> None:
    env = FingerEnv(task_name="spin", seed=0)
    env.reset()
    with pytest.raises(ValueError):
        env.step(np.zeros(3))
    env.close()


def test_step_before_reset_raises() -> None:
    env = FingerEnv(task_name="spin", seed=0)
    with pytest.raises(RuntimeError):
        env.step(np.zeros(2))
    env.close()


def test_sample_action_is_bounded() -> None:
    env = FingerEnv(task_name="spin", seed=0)
    for _ in range(20):
        action = env.sample_action()
        assert action.shape == (2,)
        assert np.all(np.abs(action) <= 1.0)
    env.close()


def test_diagnostics_are_optional() -> None:
    env = FingerEnv(task_name="turn_easy", seed=0)
    info = env.reset().info
    assert "qpos0" not in info
    assert "target" not in info

    env_diag = FingerEnv(task_name="turn_easy", seed=0, diagnostics=True)
    info = env_diag.reset().info
    assert info["qpos0"].shape == (env_diag.model.nq,)
    assert info["target"].shape == (2,)
    assert info["init_attempts"] >= 1
    env.close()
    env_diag.close()


def test_reset_raises_when_no_contact_free_pose_exists(tmp_path: Path) -> None:
    """A static block overlapping the spinner makes every sample collide."""
    xml = Path(FINGER_MODEL_PATH).read_text()
    blocker = (
        '<body name="blocker" pos=".2 0 .4">'
        '<geom name="blocker" type="sphere" size=".05"/></body>\n'
        '    <site name="target"'
    )
    xml = xml.replace('<site name="target"', blocker, 1)
    path = tmp_path / "finger_blocked.xml"
    path.write_text(xml)

    env = FingerEnv(task_name="turn_easy", seed=0, model_path=str(path), max_init_attempts=5)
    with pytest.raises(InitializationExhaustedError) as excinfo:
        env.reset()
    assert excinfo.value.attempts == 5
    env.close()


def test_model_missing_required_names_is_a_configuration_error(tmp_path: Path) -> None:
    xml = Path(FINGER_MODEL_PATH).read_text()
    xml = xml.replace('<framepos name="spinner" objtype="xbody" objname="spinner"/>', "")
    path = tmp_path / "finger_no_spinner_sensor.xml"
    path.write_text(xml)
    with pytest.raises(ConfigurationError, match="spinner"):
        FingerEnv(task_name="spin", model_path=str(path))
