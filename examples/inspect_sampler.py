"""
Inspect a categorical sampler built from a config file.

Sample commands:
  python examples/inspect_sampler.py --config-path examples/configs/sampler_config.json
  python examples/inspect_sampler.py --config-path examples/configs/sampler_config.json --batch-size 32
"""
import argparse
import logging
from collections import Counter

import torch
from torch.utils.data import DataLoader, TensorDataset

from weightedcategorical.samplers import load_sampler_config, make_index_sampler, make_sampler


def inspect(config_path: str, batch_size: int):
    """
    Builds both samplers from a config file and compares the observed
    sampling frequencies with the configured weights.

    Args:
        config_path: Path to the sampler config file
        batch_size: DataLoader batch size for the index sampler run
    """
    config = load_sampler_config(config_path)
    if config is None:
        logging.error(f"Could not load a sampler config from {config_path}")
        return

    # --- 1. Configured distribution ---
    sampler = make_sampler(config)
    dist = sampler.distribution

    print("\n" + "=" * 80)
    print("1. Configured Distribution")
    print("=" * 80)
    print(f"  Mode: {'uniform' if dist.uniform else 'weighted'}")
    for (value, weight), probability in zip(dist.categories, dist.probabilities):
        print(f"  - {value!s:<12} weight {weight:>8.3f}   p = {probability:.3f}")

    # --- 2. Direct sampling ---
    n_samples = config.num_samples or 1000
    counts = Counter(sampler.sample_many(n_samples))

    print("\n" + "=" * 80)
    print(f"2. Observed Frequencies ({n_samples:,} direct samples)")
    print("=" * 80)
    for value, probability in zip(dist.values, dist.probabilities):
        observed = counts[value] / n_samples
        print(f"  - {value!s:<12} expected {probability:.3f}   observed {observed:.3f}")

    # --- 3. DataLoader sampling ---
    index_sampler = make_index_sampler(config)
    dataset = TensorDataset(torch.arange(len(dist)))
    loader = DataLoader(dataset, batch_size=batch_size, sampler=index_sampler)

    index_counts = Counter()
    for (batch,) in loader:
        index_counts.update(batch.tolist())

    print("\n" + "=" * 80)
    print(f"3. DataLoader Index Frequencies ({len(index_sampler):,} indices)")
    print("=" * 80)
    for idx, value in enumerate(dist.values):
        print(f"  - [{idx}] {value!s:<10} {index_counts[idx] / len(index_sampler):.3f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description="Inspect a categorical sampler config.")
    parser.add_argument(
        "--config-path",
        type=str,
        required=True,
        help="Path to the JSON sampler config file.",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=64,
        help="Batch size for the DataLoader run.",
    )
    args = parser.parse_args()
    inspect(args.config_path, args.batch_size)
