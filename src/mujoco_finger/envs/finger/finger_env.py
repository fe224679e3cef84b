"""Planar finger manipulation tasks.

A two-link finger actuates a free-spinning body on a hinge:
- ``spin``: make the body rotate faster than a fixed angular velocity
- ``turn_easy`` / ``turn_hard``: bring the body's tip into a target disc
  placed at a random bearing around the hinge

Rewards are sparse (0 or 1).  Episodes only end when the step budget runs
out; reaching the goal never terminates them.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, Optional

import gymnasium
import mujoco
import numpy as np

from mujoco_finger.core.sensors import SensorLayout, SensorSnapshot
from mujoco_finger.core.xml_builder import build_model
from mujoco_finger.envs.finger.observations import (
    build_observation,
    observation_shapes as _observation_shapes,
)
from mujoco_finger.envs.finger.resetting import (
    DEFAULT_MAX_ATTEMPTS,
    EpisodeInit,
    initialize_episode,
)
from mujoco_finger.envs.finger.rewards import compute_reward
from mujoco_finger.envs.finger.variants import parse_task_variant
from mujoco_finger.envs.step_result import StepResult
from mujoco_finger.errors import ConfigurationError
from mujoco_finger.robots.configs import (
    FINGER_MODEL_PATH,
    FingerModelConfig,
    resolve_finger_handles,
)

logger = logging.getLogger(__name__)


def _positive_int(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    return int(value)


class FingerGymnasium(gymnasium.Env):
    """Gymnasium wrapper around :class:`FingerEnv`."""

    metadata = {"render_modes": []}

    def __init__(
        self,
        task_name: str = "spin",
        seed: int | None = None,
        frame_skip: int = 2,
        max_episode_steps: int = 1000,
        **env_kwargs,
    ):
        self.base = FingerEnv(
            task_name=task_name,
            frame_skip=frame_skip,
            max_episode_steps=max_episode_steps,
            seed=seed,
            **env_kwargs,
        )
        self.action_space = gymnasium.spaces.Box(
            -1.0, 1.0, shape=(self.base.action_dim,), dtype=np.float32
        )
        self.observation_space = gymnasium.spaces.Dict(
            {
                key: gymnasium.spaces.Box(-np.inf, np.inf, shape=shape, dtype=np.float64)
                for key, shape in self.base.observation_shapes.items()
            }
        )
        self.render_mode = None

    def reset(self, *, seed: int | None = None, options=None):
        super().reset(seed=seed)
        res = self.base.reset(seed=seed)
        return res.obs, dict(res.info, discount=res.discount)

    def step(self, action):
        res = self.base.step(action)
        terminated = self.base.should_terminate_episode()
        truncated = bool(res.done and not terminated)
        info = dict(res.info, discount=res.discount)
        return res.obs, res.reward, terminated, truncated, info

    def close(self):
        self.base.close()


class FingerEnv:
    """Finger spin/turn task on top of a MuJoCo model.

    Parameters
    ----------
    task_name : str
        ``"spin"``, ``"turn_easy"`` or ``"turn_hard"``.
    frame_skip : int
        Physics steps per control step.
    max_episode_steps : int
        Control steps per episode; ``done`` is set once it is reached.
    seed : int | None
        Seed for this instance's random generator.
    model_path : str
        MJCF to load.  Must declare the objects named in
        :class:`FingerModelConfig`.
    max_init_attempts : int
        Joint samples tried per reset before giving up.
    diagnostics : bool
        If ``True``, ``info`` carries the initial joint configuration, the
        target location and the number of reset attempts.
    """

    def __init__(
        self,
        task_name: str = "spin",
        frame_skip: int = 2,
        max_episode_steps: int = 1000,
        seed: Optional[int] = None,
        model_path: str = FINGER_MODEL_PATH,
        max_init_attempts: int = DEFAULT_MAX_ATTEMPTS,
        diagnostics: bool = False,
    ) -> None:
        self.variant = parse_task_variant(task_name)
        self.task_name = task_name
        self.frame_skip = _positive_int("frame_skip", frame_skip)
        self.max_episode_steps = _positive_int("max_episode_steps", max_episode_steps)
        self.max_init_attempts = _positive_int("max_init_attempts", max_init_attempts)
        self.diagnostics = bool(diagnostics)
        self._rng = np.random.default_rng(seed)

        self.model_config = dataclasses.replace(FingerModelConfig(), model_path=model_path)
        self.model = build_model(model_path)
        self.data = mujoco.MjData(self.model)

        self._handles = resolve_finger_handles(self.model, self.model_config)
        self._sensors = SensorLayout.from_model(self.model).require(
            self.model_config.sensor_names
        )
        if self.model.nu != self.action_dim:
            raise ConfigurationError(
                f"Model has {self.model.nu} actuators, expected {self.action_dim}."
            )

        self.step_id = 0
        self._episode: EpisodeInit | None = None
        logger.debug(
            "Created finger env task=%s frame_skip=%d max_episode_steps=%d",
            self.task_name, self.frame_skip, self.max_episode_steps,
        )

    # ------------------------------------------------------------------ API
    @property
    def action_dim(self) -> int:
        """Action dimensionality: ``[proximal, distal]`` motor commands."""
        return 2

    @property
    def observation_shapes(self) -> Dict[str, tuple]:
        return _observation_shapes(self.variant)

    @property
    def target_radius(self) -> float:
        """Radius of the target site (0 for spin)."""
        if not self.variant.has_target:
            return 0.0
        return float(self.model.site_size[self._handles.target_site_id, 0])

    def sensor_snapshot(self) -> SensorSnapshot:
        """Copy the current sensor readings."""
        return self._sensors.snapshot(self.data, target_radius=self.target_radius)

    def should_terminate_episode(self) -> bool:
        """The task itself never ends an episode; only the step budget does."""
        return False

    # ------------------------------------------------------------------ Reset
    def reset(self, seed: Optional[int] = None) -> StepResult:
        """Start a new episode and return its first record."""
        if seed is not None:
            self._rng = np.random.default_rng(seed)
        mujoco.mj_resetData(self.model, self.data)
        mujoco.mj_forward(self.model, self.data)
        self.step_id = 0

        self._episode = initialize_episode(
            self.model,
            self.data,
            self._rng,
            self.variant,
            self._handles,
            max_attempts=self.max_init_attempts,
        )
        return self._result(reward=0.0, done=False)

    # ------------------------------------------------------------------ Step
    def step(self, action: Iterable[float]) -> StepResult:
        """Apply ``action`` for ``frame_skip`` physics steps."""
        if self._episode is None:
            raise RuntimeError("reset() must be called before step().")
        act = np.asarray(action, dtype=float).flatten()
        if act.shape[0] != self.action_dim:
            raise ValueError(f"action should have shape ({self.action_dim},)")
        # ctrlrange in the MJCF clamps out-of-range commands.
        self.data.ctrl[:] = act

        # step2 before step1 leaves sensors consistent with the new state.
        for _ in range(self.frame_skip):
            mujoco.mj_step2(self.model, self.data)
            mujoco.mj_step1(self.model, self.data)
        self.step_id += 1

        reward = compute_reward(self.sensor_snapshot(), self.variant)
        done = bool(
            self.should_terminate_episode() or self.step_id >= self.max_episode_steps
        )
        return self._result(reward=reward, done=done)

    def _result(self, reward: float, done: bool) -> StepResult:
        obs = build_observation(self.sensor_snapshot(), self.variant)
        info: Dict = {"step": self.step_id}
        if self.diagnostics and self._episode is not None:
            info["qpos0"] = self._episode.qpos0.copy()
            info["init_attempts"] = self._episode.attempts
            if self._episode.target is not None:
                info["target"] = self._episode.target.copy()
        return StepResult(obs=obs, reward=float(reward), discount=1.0, done=done, info=info)

    # ------------------------------------------------------------------ Misc
    def sample_action(self) -> np.ndarray:
        return self._rng.uniform(-1.0, 1.0, size=self.action_dim)

    def close(self) -> None:
        self._episode = None
