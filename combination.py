'''
The file for the value classes produced by a cross: phenotype combinations, target genotypes and summary statistics.
'''

class combination:
    '''
    The class for a single cell of the 2^N phenotype space of a cross.
    '''
    traits: list[bool] = []     # Per locus: True if dominant-pattern (heterozygous/homozygous dominant), False if homozygous recessive
    num = 0                     # Number of Punnett-square cells (out of den) giving this combination
    den = 1                     # Size of the Punnett square, 4^N
    desc = ''                   # Phenotype names, comma-joined
    notation = ''               # Genotype tokens, space-joined (e.g. 'L_ cc')
    expected = 0.0              # Expected count within a population of tot_pop
    tot_pop = 0.0               # The population size the expected count is scaled to
    idx = 0                     # Enumeration index (bit j of idx is 0 for a dominant-pattern locus j)

    def __init__(self, **kwargs):
        '''
        Initialises the combination. Combinations don't change once made.

        ### Parameters
        - `traits`: Per-locus dominant-pattern flags
        - `num`: Numerator of the combination's probability
        - `den`: Denominator of the combination's probability
        - `desc`: The phenotype description
        - `notation`: The genotype notation
        - `expected`: The expected number of individuals showing the combination
        - `tot_pop`: The total population the expected number is based on
        - `idx`: The enumeration index
        '''
        self.__dict__.update(kwargs)
        self.__dict__['traits'] = list(self.traits)

    def __setattr__(self, key, value):
        raise AttributeError(f'combination {self.notation!r} is immutable (tried to set {key!r})')

    @property
    def tokens(self) -> list[str]:
        '''
        The genotype notation split into its per-locus tokens.
        '''
        return self.notation.split()

    @property
    def prob(self):
        return self.num/self.den

    @property
    def pct(self):
        return 100*self.prob

    @property
    def num_dom(self):
        return sum(self.traits)

    def __eq__(self, other):
        if not isinstance(other, combination): return NotImplemented
        return self.__dict__ == other.__dict__

    def __hash__(self):
        return hash((self.notation, self.num, self.den, self.tot_pop))

    def __str__(self):
        return f'{self.num}/{self.den} = {self.desc} ({self.notation})'

    def __repr__(self):
        return self.__str__()


class target:
    '''
    A single-locus genotype filter token ('L' for dominant-pattern, 'll' for homozygous recessive) and its human-readable label.
    '''
    genotype = ''
    desc = ''

    def __init__(self, genotype: str, desc: str=''):
        self.genotype = genotype
        self.desc = desc if desc else genotype

    def __eq__(self, other):
        if not isinstance(other, target): return NotImplemented
        return (self.genotype, self.desc) == (other.genotype, other.desc)

    def __hash__(self):
        return hash((self.genotype, self.desc))

    def __str__(self):
        return self.genotype

    def __repr__(self):
        return f'target({self.genotype!r}, {self.desc!r})'


class summary:
    '''
    Aggregate statistics over every combination matching all targets.
    '''
    num = 0             # Summed numerators of the matching combinations
    den = 1             # Shared denominator
    pct = 0.0           # num/den as a percentage
    expected = 0.0      # Expected number of matching individuals

    def __init__(self, num: int, den: int, pct: float, expected: float):
        self.num = num
        self.den = den
        self.pct = pct
        self.expected = expected

    @property
    def ratio(self):
        return f'{self.num}/{self.den}'

    def __eq__(self, other):
        if not isinstance(other, summary): return NotImplemented
        return (self.num, self.den, self.pct, self.expected) == (other.num, other.den, other.pct, other.expected)

    def __str__(self):
        return f'{self.ratio} ({self.pct}%), expected {self.expected}'

    def __repr__(self):
        return self.__str__()
