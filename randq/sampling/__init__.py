from .reservoir import ReservoirSampler, reservoir_sample
