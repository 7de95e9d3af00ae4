'''
Error types raised by the cross engine. Only malformed crosses and malformed user counts are errors; everything else falls back
leniently (unknown tokens never match, malformed trait entries are skipped).
'''

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping

class CrossErrorCode(Enum):
	MISMATCHED_TRAIT_COUNT = auto()
	INVALID_POPULATION = auto()
	INVALID_OBSERVED = auto()

@dataclass(eq=False)
class CrossError(Exception):
	'''
	Structured error: an error code plus whatever context explains it.
	'''
	code: CrossErrorCode
	ctx: Mapping[str, Any] | None = None

	def __str__(self) -> str:
		if not self.ctx: return self.code.name
		parts = ', '.join(f'{k}={v!r}' for k, v in self.ctx.items())
		return f'{self.code.name}: {parts}'

class MismatchedTraitCountError(CrossError):
	'''
	The two parents don't describe the same number of loci, so the cross is undefined.
	'''
	def __init__(self, org_1: str, num_1: int, org_2: str, num_2: int):
		super().__init__(CrossErrorCode.MISMATCHED_TRAIT_COUNT, ctx={'org_1': org_1, 'num_1': num_1, 'org_2': org_2, 'num_2': num_2})
		self.counts = (num_1, num_2)

class InvalidPopulationError(CrossError):
	def __init__(self, tot_pop: float):
		super().__init__(CrossErrorCode.INVALID_POPULATION, ctx={'tot_pop': tot_pop})

class ObservedCountError(CrossError):
	def __init__(self, error: str, **kwargs):
		super().__init__(CrossErrorCode.INVALID_OBSERVED, ctx={'error': error, **kwargs})
