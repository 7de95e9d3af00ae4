'''
Library of functions for turning textual input (trait lists, target genotypes, observed counts) into the objects the cross engine uses.
'''

from locus import *
from combination import *
from errors import ObservedCountError
from func_lib import *
import logging

logger = logging.getLogger(__name__)

def parseTraits(traits_str: str) -> list[locus]:
	'''
	Parses a comma-separated trait list, each entry formatted as `Name:Dominant:AlleleLabel` (e.g. 'Round:true:L,Yellow:true:C').
	Only the literal 'true' marks a dominant trait. Entries without exactly three fields are skipped.
	'''
	traits = []
	for trait_str in splitStr(traits_str):
		parts = trait_str.split(':')
		if len(parts) != 3:
			logger.debug('skipping malformed trait entry %r', trait_str)
			continue
		traits += [locus(name=parts[0], dominant=parts[1] == 'true', char=parts[2])]
	return traits

def parseOrganism(name: str, traits_str: str) -> organism:
	return organism(name, parseTraits(traits_str))

def getGenotypeDescription(genotype: str, org_1: organism, org_2: organism) -> str:
	'''
	Maps a target token back to the name of the phenotype it stands for. 'll' gives the recessive phenotype at the 'L' locus and 'L'
	gives the dominant one. Unrecognised tokens are returned unchanged.

	### Parameters
	- `genotype`: The target token.
	- `org_1`: The first parent. Its loci (and allele characters) are scanned in order.
	- `org_2`: The second parent, holding the other phenotype at each locus.
	'''
	for trt_1, trt_2 in zip(org_1.traits, org_2.traits):
		if genotype == trt_1.rec_token: return trt_2.name if trt_1.dominant else trt_1.name
		if genotype == trt_1.char: return trt_1.name if trt_1.dominant else trt_2.name
	return genotype

def parseTargetGenotypes(genotypes_str: str, org_1: organism, org_2: organism) -> list[target]:
	'''
	Parses a comma-separated list of target tokens (e.g. 'll,cc') into `target` objects labelled from the cross.
	'''
	return [target(gt, getGenotypeDescription(gt, org_1, org_2)) for gt in splitStr(genotypes_str)]

def parseObserved(observed_str: str) -> list[int]:
	'''
	Parses a comma-separated list of observed counts (e.g. '315,101,108,32'), one per combination in listing order.
	'''
	counts = []
	for obs in splitStr(observed_str):
		try: count = int(obs.strip())
		except ValueError: raise ObservedCountError('observed counts must be integers', value=obs) from None
		if count < 0: raise ObservedCountError('observed counts must be non-negative', value=count)
		counts += [count]
	return counts
