'''
Library of functions for rendering the results of a cross as text. Everything here takes already-computed values and returns strings;
nothing is printed except by `printResults`.
'''

from color import *
from combination import *
from locus import organism
from match_lib import matchesAll
from data_lib import combsToDF, fitDict
from func_lib import *

RULE = 21*'='
ALL_RULE = 23*'='

def combStr(comb: combination, desc_color: Color=Color.WHITE, unit: str='plants', use_color: bool=True) -> list[str]:
	'''
	Renders a single combination as its lines of output (probability & phenotype, genotype, expected count).
	'''
	return [f'{colored(f"{comb.num}/{comb.den}", Color.WHITE, bold=True, use_color=use_color)} '
			f'{colored(f"({fmtPct(comb.pct)})", Color.CYAN, use_color=use_color)} = {colored(comb.desc, desc_color, use_color=use_color)}',
			f'    Genotype: {colored(comb.notation, Color.MAGENTA, use_color=use_color)}',
			f'    Expected number of {unit}: {colored(fmtNum(comb.expected), Color.YELLOW, use_color=use_color)}']

def summaryStr(summ: summary, unit: str='plants', use_color: bool=True) -> list[str]:
	'''
	Renders the target summary block.
	'''
	def lbl(s: str): return colored(s, Color.WHITE, bold=True, use_color=use_color)
	return [f'{colored("Target Traits Summary", Color.BLUE, bold=True, use_color=use_color)}:',
			colored(RULE, Color.BLUE, use_color=use_color),
			f'{lbl("Total Probability")}: {colored(summ.ratio, Color.WHITE, use_color=use_color)}',
			f'{lbl("Percentage")}: {colored(fmtPct(summ.pct), Color.CYAN, use_color=use_color)}',
			f'{lbl(f"Expected Total {unit.capitalize()} with Target Traits")}: {colored(fmtNum(summ.expected), Color.YELLOW, use_color=use_color)}',
			'']

def fitStr(fit: tuple[float, float, int], use_color: bool=True) -> list[str]:
	'''
	Renders the chi-square goodness-of-fit block.
	'''
	fd = fitDict(fit)
	return [f'{colored("Goodness of Fit", Color.BLUE, bold=True, use_color=use_color)}:',
			colored(15*'=', Color.BLUE, use_color=use_color),
			f'Chi-square: {colored(str(fd["chi2"]), Color.WHITE, use_color=use_color)} ({fd["dof"]} degrees of freedom)',
			f'p-value: {colored(str(fd["p"]), Color.CYAN, use_color=use_color)}',
			'']

def resultsStr(org_1: organism, org_2: organism, tot_pop: float, targets: list[target], all_combs: list[combination],
			   filt_combs: list[combination], summ: summary, fit: tuple[float, float, int]=None, unit: str='plants',
			   use_color: bool=True) -> str:
	'''
	Renders the full report of a cross.

	### Parameters
	- `org_1`, `org_2`: The parents.
	- `tot_pop`: The total number of F2 individuals.
	- `targets`: The target genotypes (may be empty).
	- `all_combs`: Every combination of the cross.
	- `filt_combs`: The combinations matching all targets.
	- `summ`: The summary of the matches.
	- `fit`: The result of `chiSquareTest`, if observed counts were given.
	- `unit`: The noun used for individuals (e.g. 'plants').
	- `use_color`: Whether or not to write color codes.
	'''
	lines = ['', colored(f'F2 Generation Probabilities for {org_1.name} × {org_2.name}', Color.CYAN, bold=True, use_color=use_color),
			 f'{colored(f"Total {unit}", Color.WHITE, bold=True, use_color=use_color)}: {fmtTotal(tot_pop)}']
	if targets:
		lines += ['', f'{colored("Target traits", Color.YELLOW, bold=True, use_color=use_color)}:']
		lines += [f'- {coloredHex(t.desc, use_color=use_color)} ({colored(t.genotype, Color.YELLOW, use_color=use_color)})' for t in targets]
		lines += ['', f'{colored("Matching Combinations", Color.GREEN, bold=True, use_color=use_color)}:', colored(RULE, Color.GREEN, use_color=use_color)]
		for comb in filt_combs: lines += combStr(comb, Color.GREEN, unit, use_color) + ['']
		lines += summaryStr(summ, unit, use_color)
	if fit is not None: lines += fitStr(fit, use_color)
	lines += [f'{colored("All Possible Combinations", Color.MAGENTA, bold=True, use_color=use_color)}:', colored(ALL_RULE, Color.MAGENTA, use_color=use_color)]
	for comb in all_combs:
		is_match = bool(targets) and matchesAll(comb, targets)
		lines += combStr(comb, Color.GREEN if is_match else Color.WHITE, unit, use_color)
		if is_match: lines += [f'    {colored("★ Matches target traits", Color.YELLOW, bold=True, use_color=use_color)}']
		lines += ['']
	return '\n'.join(lines)

def tableStr(org_1: organism, org_2: organism, tot_pop: float, targets: list[target], all_combs: list[combination],
			 summ: summary, fit: tuple[float, float, int]=None, unit: str='plants') -> str:
	'''
	Renders the results of a cross as a plain table (no color), one row per combination.
	'''
	df = combsToDF(all_combs, targets)
	df['pct'] = df['pct'].map(fmtPct)
	df['expected'] = df['expected'].map(fmtNum)
	lines = [f'F2 Generation Probabilities for {org_1.name} × {org_2.name} (total {unit}: {fmtTotal(tot_pop)})', '',
			 df.to_string(index=False)]
	if targets:
		lines += ['', f'Targets: {", ".join(f"{t.desc} ({t.genotype})" for t in targets)}',
				  f'Matched: {summ.ratio} ({fmtPct(summ.pct)}), expected {unit}: {fmtNum(summ.expected)}']
	if fit is not None:
		fd = fitDict(fit)
		lines += ['', f'Chi-square: {fd["chi2"]} ({fd["dof"]} dof), p-value: {fd["p"]}']
	return '\n'.join(lines)

def fmtTotal(tot_pop: float) -> str:
	'''
	Formats the total population: whole numbers without a decimal point, anything else as given.
	'''
	return str(int(tot_pop)) if float(tot_pop).is_integer() else str(tot_pop)

def printResults(*args, **kwargs):
	'''
	Prints the full report of a cross to the console (see `resultsStr` for the parameters).
	'''
	print(resultsStr(*args, **kwargs))
