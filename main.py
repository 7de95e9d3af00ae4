'''
Main file for the F2 cross calculator.
'''

from gen_funcs import *
from match_lib import *
from parse_lib import *
from data_lib import chiSquareTest
from report_lib import printResults, tableStr
from color import colorEnabled
from errors import CrossError
from typing import Iterable
import argparse
import logging

####################################
### ----- BEGIN USER INPUT ----- ###
####################################

TOTAL_PLANTS = 64		# Default number of F2 individuals to scale expected counts to
UNIT = 'plants'			# What the individuals are called in the report
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

# Built-in crosses, as (mother name, mother traits, father name, father traits) in the usual Name:Dominant:AlleleLabel encoding
SCENARIOS = {
	'leaves': ('Round leaves', 'Round:true:L', 'Mutant leaves', 'Mutant:false:L'),
	'leaves_foliage': ('Round green', 'Round:true:L,Green:true:C', 'Mutant purple', 'Mutant:false:L,Purple:false:C'),
	'seeds': ('Round yellow', 'Round:true:R,Yellow:true:Y', 'Wrinkled green', 'Wrinkled:false:R,Green:false:Y'),
	'seeds_flowers': ('Round yellow purple', 'Round:true:R,Yellow:true:Y,Purple:true:P',
					  'Wrinkled green white', 'Wrinkled:false:R,Green:false:Y,White:false:P'),
}

##################################
### ----- END USER INPUT ----- ###
##################################

logger = logging.getLogger(__name__)

def configureLogging(verbose: bool=False):
	'''
	Configures console logging (only if nothing else has). Warnings and up by default, everything with `verbose`.
	'''
	if not logging.getLogger().handlers:
		logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

def run(org_1: organism, org_2: organism, tot_pop: float=TOTAL_PLANTS, targets: list=(), observed: list[int]=None):
	'''
	Computes everything reported for a cross.

	### Parameters
	- `org_1`: The mother.
	- `org_2`: The father.
	- `tot_pop`: The number of F2 individuals.
	- `targets`: The target genotypes (`target` objects or raw tokens).
	- `observed`: Observed counts per combination (listing order) to test against the expected ratios, if any.

	### Returns
	- `all_combs`: Every combination, most probable first.
	- `filt_combs`: The combinations matching every target.
	- `summ`: The summary of the matches.
	- `fit`: `(chi-square, p-value, degrees of freedom)`, or `None` without observed counts.
	'''
	all_combs = calcF2Probs(org_1, org_2, tot_pop)
	filt_combs, summ = filterCombinations(all_combs, list(targets))
	fit = chiSquareTest(all_combs, observed) if observed else None
	return all_combs, filt_combs, summ, fit

def _buildParser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Calculate F2 generation phenotype probabilities for a cross of two organisms')
	fmt_help = "in the format 'Name:Dominant:GeneLabel,Name:Dominant:GeneLabel,...'"
	parser.add_argument('--motherName', default='', help='Name of the mother plant')
	parser.add_argument('--motherTraits', default='', help=f'Traits of the mother plant {fmt_help}')
	parser.add_argument('--fatherName', default='', help='Name of the father plant')
	parser.add_argument('--fatherTraits', default='', help=f'Traits of the father plant {fmt_help}')
	parser.add_argument('--totalPlants', type=float, default=TOTAL_PLANTS, help='Total number of plants')
	parser.add_argument('--targetGenotypes', default='',
						help="Comma-separated list of target genotypes (e.g., 'll,cc' for mutant leaves and purple foliage)")
	parser.add_argument('--scenario', choices=sorted(SCENARIOS), help='Use a built-in cross (explicit names/traits still override it)')
	parser.add_argument('--observed', default='', help="Comma-separated observed counts, one per combination in listing order")
	parser.add_argument('--format', choices=['text', 'table'], default='text', help='Output format')
	parser.add_argument('--unit', default=UNIT, help='What the individuals are called in the report')
	parser.add_argument('--no-color', action='store_true', help='Disable colored output')
	parser.add_argument('--verbose', action='store_true', help='Log debugging information')
	return parser

def main(argv: Iterable[str] | None = None) -> int:
	args = _buildParser().parse_args(argv)
	configureLogging(args.verbose)

	m_name, m_traits, f_name, f_traits = SCENARIOS.get(args.scenario, ('', '', '', ''))
	m_name = args.motherName or m_name
	m_traits = args.motherTraits or m_traits
	f_name = args.fatherName or f_name
	f_traits = args.fatherTraits or f_traits
	if not (m_name and m_traits and f_name and f_traits):
		print('All plant names and traits must be provided')
		return 1

	mother = parseOrganism(m_name, m_traits)
	father = parseOrganism(f_name, f_traits)
	targets = parseTargetGenotypes(args.targetGenotypes, mother, father)
	observed = parseObserved(args.observed)
	logger.debug('mother %r, father %r, targets %s', mother, father, targets)

	all_combs, filt_combs, summ, fit = run(mother, father, args.totalPlants, targets, observed)
	if args.format == 'table': print(tableStr(mother, father, args.totalPlants, targets, all_combs, summ, fit, unit=args.unit))
	else: printResults(mother, father, args.totalPlants, targets, all_combs, filt_combs, summ, fit, unit=args.unit,
					   use_color=colorEnabled(not args.no_color))
	return 0

def entrypoint() -> None:
	try:
		raise SystemExit(main())
	except CrossError as exc:
		raise SystemExit(f'error: {exc}')

if __name__ == '__main__':
	entrypoint()
