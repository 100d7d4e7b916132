from typing import Optional, TypeVar, Union

import numpy as np

T = TypeVar("T")
Seed = Optional[Union[int, np.random.SeedSequence]]
