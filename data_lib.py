'''
Library of miscellaneous functions related to data analysis: tabulating combinations and testing observed counts against them.
'''

from func_lib import *
from combination import *
from match_lib import matchesAll
from errors import ObservedCountError
from scipy.stats import chisquare
import pandas as pd

COLUMNS = ['phenotype', 'genotype', 'num', 'den', 'pct', 'expected']

def combsToDF(combs: list[combination], targets: list=None) -> pd.DataFrame:
	'''
	Turns the given combinations into a `pandas.DataFrame` (one row per combination, in order). If targets are given, a boolean `match`
	column marks the combinations matching all of them.
	'''
	df = pd.DataFrame([(c.desc, c.notation, c.num, c.den, c.pct, c.expected) for c in combs], columns=COLUMNS)
	if targets: df['match'] = [matchesAll(c, targets) for c in combs]
	return df

def chiSquareTest(combs: list[combination], observed: list[int]) -> tuple[float, float, int]:
	'''
	Pearson's chi-square goodness-of-fit test of observed counts against the Mendelian ratios of the given combinations.

	### Parameters
	- `combs`: The combinations of the cross, in listing order.
	- `observed`: The observed number of individuals showing each combination, in the same order.

	### Returns
	- `stat`: The chi-square statistic.
	- `p_val`: The p-value (the chance of a deviation at least this large if the ratios hold).
	- `dof`: Degrees of freedom (number of combinations - 1).
	'''
	if len(observed) != len(combs):
		raise ObservedCountError('need one observed count per combination', expected=len(combs), got=len(observed))
	obs = np.array(observed, dtype='float64')
	tot_obs = obs.sum()
	if not tot_obs: raise ObservedCountError('observed counts sum to zero')
	exp = tot_obs*normalise_np(np.array([c.num for c in combs], dtype='float64'))
	stat, p_val = chisquare(obs, f_exp=exp)
	return float(stat), float(p_val), len(combs) - 1

def fitDict(fit: tuple[float, float, int], prec: int=4) -> dict[str, float]:
	'''
	Turns the result of `chiSquareTest` into a labelled dict, rounded for display.
	'''
	stat, p_val, dof = fit
	return dictify(['chi2', 'dof', 'p'], [roundNum(stat, prec), dof, roundNum(p_val, prec)])
