"""MuJoCo Finger — spin and turn tasks for a planar two-link finger.

Quick start::

    from mujoco_finger.envs import FingerEnv, FingerGymnasium

    # Raw environment (dm_env-style records)
    env = FingerEnv(task_name="turn_easy", seed=0)
    first = env.reset()
    result = env.step(env.sample_action())
    result.obs["dist_to_target"], result.reward, result.discount

    # Gymnasium wrapper
    gym_env = FingerGymnasium(task_name="spin")
    obs, info = gym_env.reset(seed=0)
    obs, reward, terminated, truncated, info = gym_env.step(gym_env.action_space.sample())

    # Via gymnasium.make
    import gymnasium
    env = gymnasium.make("MuJoCoFinger/TurnHard-v0")
"""

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Gymnasium environment registration
# ---------------------------------------------------------------------------
import gymnasium

_ENTRY_POINT = "mujoco_finger.envs.finger.finger_env:FingerGymnasium"

gymnasium.register(
    id="MuJoCoFinger/Spin-v0",
    entry_point=_ENTRY_POINT,
    max_episode_steps=1000,
    kwargs={"task_name": "spin"},
)

gymnasium.register(
    id="MuJoCoFinger/TurnEasy-v0",
    entry_point=_ENTRY_POINT,
    max_episode_steps=1000,
    kwargs={"task_name": "turn_easy"},
)

gymnasium.register(
    id="MuJoCoFinger/TurnHard-v0",
    entry_point=_ENTRY_POINT,
    max_episode_steps=1000,
    kwargs={"task_name": "turn_hard"},
)
