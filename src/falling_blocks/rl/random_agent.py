from __future__ import annotations

import argparse

import gymnasium as gym

# Ensure envs are registered
import falling_blocks.env  # noqa: F401


def make_env(gravity_every: int = 1, max_steps: int = 10000) -> gym.Env:
    # The env counts its own steps; gym.make would swallow max_episode_steps
    return gym.make("FallingBlocks-10x20-v0", gravity_every=gravity_every, max_steps=max_steps)


def run_random(episodes: int = 1, seed: int | None = None, gravity_every: int = 1,
               max_steps: int = 10000) -> list[dict]:
    env = make_env(gravity_every, max_steps)
    results: list[dict] = []
    try:
        env.action_space.seed(seed)
        for ep in range(episodes):
            ep_seed = None if seed is None else seed + ep
            obs, info = env.reset(seed=ep_seed)
            total_reward = 0.0
            steps = 0
            while True:
                obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
                total_reward += float(reward)
                steps += 1
                if terminated or truncated:
                    break
            results.append({"episode": ep, "steps": steps, "reward": total_reward, **info})
    finally:
        env.close()
    return results


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with uniformly random actions")
    p.add_argument("--episodes", type=int, default=1)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity_every", type=int, default=1,
                   help="Apply one gravity tick every N agent steps")
    p.add_argument("--max_steps", type=int, default=10000)
    return p


def main() -> None:
    args = build_parser().parse_args()
    results = run_random(args.episodes, args.seed, args.gravity_every, args.max_steps)
    for r in results:
        print(f"episode {r['episode']}: steps={r['steps']} score={r['score']} "
              f"lines={r['lines_cleared']} level={r['level']}")


if __name__ == "__main__":  # pragma: no cover
    main()
