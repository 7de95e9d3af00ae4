'''
Library of miscellaneous functions, most of which being fairly general and not semantically tied to a specific project.
'''

import numpy as np

def normalise_np(l: np.ndarray[float]):
	'''
	Normalises the given NumPy array.
	'''
	return l/sum(l)

def dictify(ks: list, vs: list):
	'''
	Turns the given lists of keys and values into a dict. These should be the same length!
	'''
	return {k: v for k, v in zip(ks, vs)}

def roundNum(f: float, prec: int=2) -> float:
	'''
	Rounds the given number to the given number of decimal points.

	### Parameters
	- `f`: The number in question.
	- `prec`: The number of decimal points to round it to.
	'''
	return round(f*(10**prec))/(10**prec)

def fmtNum(f: float, prec: int=1) -> str:
	'''
	Formats the given number with a fixed number of decimal points (e.g. 48 -> '48.0').
	'''
	return f'{f:.{prec}f}'

def fmtPct(f: float, prec: int=1) -> str:
	'''
	Formats the given percentage (0-100) with a trailing percent sign.
	'''
	return f'{fmtNum(f, prec)}%'

def splitStr(s: str, sep: str=',') -> list[str]:
	'''
	Splits the given string on `sep`. An empty string gives an empty list rather than `['']`.
	'''
	if not s: return []
	return s.split(sep)

def list_str(lst: list, limit: int=40, shoulder: int=5):
	'''
	Writes the given list as a string, if it is too long to reasonably print to the console.
	'''
	if len(lst) <= limit: return str(lst)
	else: return f'{str(lst[:shoulder])[:-1]} ... {str(lst[-shoulder:])[1:]}'
