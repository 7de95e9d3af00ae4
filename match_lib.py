'''
Library of functions for matching combinations against target genotypes and summarising the matches.
'''

from combination import *
from func_lib import list_str
import logging

logger = logging.getLogger(__name__)

def isGenotypeMatch(genotype: str, notation: str) -> bool:
	'''
	Whether or not the given target genotype is present in the given genotype notation. Tokens are compared against the notation's
	individual (space-separated) loci, so a token can never match across a locus boundary.

	### Parameters
	- `genotype`: The target token. Two identical characters (e.g. 'll') match that homozygous token literally; a single character
	   (e.g. 'L') matches 'L_' or 'LL'. Any other shape never matches.
	- `notation`: The full genotype notation of a combination (e.g. 'L_ cc').
	'''
	tokens = notation.split()
	if len(genotype) == 2 and genotype[0] == genotype[1]: return genotype in tokens
	if len(genotype) == 1: return f'{genotype}_' in tokens or (2*genotype).upper() in tokens
	return False

def matchesAll(comb: combination, targets: list) -> bool:
	'''
	Whether or not the given combination matches every one of the given targets (`target` objects or raw tokens).
	'''
	return all(isGenotypeMatch(str(t), comb.notation) for t in targets)

def filterCombinations(combs: list[combination], targets: list) -> tuple[list[combination], summary]:
	'''
	Selects the combinations matching every target and summarises them.

	### Parameters
	- `combs`: All combinations of a cross, as produced by `calcF2Probs`.
	- `targets`: The target genotypes (`target` objects or raw tokens). An empty list means no filter, not "match nothing".

	### Returns
	- `filtered`: The matching combinations, in their original order. With no targets, `combs` itself.
	- `summ`: A `summary` of the matches. With no targets this is the "whole population" convention: num = den = the combinations'
	   denominator, 100%, expected = den.
	'''
	den = combs[0].den if combs else 1
	if not targets: return combs, summary(den, den, 100.0, float(den))

	filtered = [c for c in combs if matchesAll(c, targets)]
	tot_prob = sum(c.num for c in filtered)
	tot_pop = combs[0].tot_pop if combs else 0.
	summ = summary(tot_prob, den, tot_prob/den*100.0, tot_prob/den*tot_pop)
	logger.debug('targets %s: %d/%d combinations match (%d/%d)', list_str([str(t) for t in targets]), len(filtered), len(combs), tot_prob, den)
	return filtered, summ
