# partial_cache/policies/sampler.py
import numpy as np

MEAN               = 0.2    # origin round-trip, seconds
STANDARD_DEVIATION = 0.05


class LatencySampler:
    """
    Draws origin processing times from N(MEAN, STANDARD_DEVIATION).
    Owns its own numpy Generator, so two samplers built from the same
    seed yield the same sequence.
    """
    def __init__(self, seed=None, mean: float = MEAN,
                 std: float = STANDARD_DEVIATION):
        self.mean = mean
        self.std  = std
        self.rng  = np.random.default_rng(seed)

    @classmethod
    def from_generator(cls, rng: np.random.Generator,
                       mean: float = MEAN, std: float = STANDARD_DEVIATION):
        sampler = cls(mean=mean, std=std)
        sampler.rng = rng
        return sampler

    def sample(self) -> float:
        return float(self.rng.normal(self.mean, self.std))
