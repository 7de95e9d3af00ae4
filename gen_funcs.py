from locus import *
from combination import *
from errors import MismatchedTraitCountError, InvalidPopulationError
import numpy as np
import logging

logger = logging.getLogger(__name__)

def calcDenominator(num_traits: int) -> int:
    '''
    The size of the Punnett square for the given number of loci (4^N, i.e. 2^(2N)).
    '''
    return 4**num_traits

def calcProbability(num_traits: int, num_rec: int) -> int:
    '''
    The numerator of a combination's probability. Every dominant-pattern locus contributes 3 of its 4 Punnett cells and every recessive
    locus contributes 1, so the numerator is 3^(number of dominant-pattern loci).
    '''
    return 3**(num_traits - num_rec)

def genStates(num_traits: int) -> np.ndarray:
    '''
    Generates the state of every locus for every combination, as a (2^N, N) boolean array. Row i is combination i; entry (i, j) is True
    when bit j of i is 0, i.e. when locus j is in its dominant-pattern state.
    '''
    idxs = np.arange(2**num_traits)
    return ((idxs[:, None] >> np.arange(num_traits)) & 1) == 0

def phenotypeName(trt_1: locus, trt_2: locus, is_dom: bool) -> str:
    '''
    Gets the name of the phenotype shown at a locus, given the two parents' versions of it and whether it's in the dominant-pattern state.
    '''
    if is_dom: return trt_1.name if trt_1.dominant else trt_2.name
    else: return trt_2.name if trt_1.dominant else trt_1.name

def calcF2Probs(org_1: organism, org_2: organism, tot_pop: float=64) -> list[combination]:
    '''
    Generates every phenotype combination of the F2 generation of the given cross, most probable first.

    ### Parameters
    - `org_1`: The first parent (conventionally the mother). Its allele characters are used for the genotype notation.
    - `org_2`: The second parent. Must have as many loci as `org_1`.
    - `tot_pop`: The number of F2 individuals to scale the expected counts to. Need not be a power of 4.

    ### Returns
    - A list of 2^N `combination` objects sorted by probability (descending). Equally probable combinations keep enumeration order.
    '''
    num_traits = org_1.num_traits
    if num_traits != org_2.num_traits:
        raise MismatchedTraitCountError(org_1.name, num_traits, org_2.name, org_2.num_traits)
    if tot_pop < 0: raise InvalidPopulationError(tot_pop)

    den = calcDenominator(num_traits)
    states = genStates(num_traits)
    combs = []
    for i, row in enumerate(states.tolist()):
        desc = []
        notation = []
        for trt_1, trt_2, is_dom in zip(org_1.traits, org_2.traits, row):
            desc += [phenotypeName(trt_1, trt_2, is_dom)]
            notation += [trt_1.dom_token if is_dom else trt_1.rec_token]
        num = calcProbability(num_traits, row.count(False))
        combs += [combination(traits=row, num=num, den=den, desc=', '.join(desc), notation=' '.join(notation),
                              expected=num*tot_pop/den, tot_pop=tot_pop, idx=i)]
    combs.sort(key=lambda c: (-c.num, c.idx))
    logger.debug('%s x %s: %d combinations over %d loci (den %d)', org_1, org_2, len(combs), num_traits, den)
    return combs
