class locus:
    '''
    The class for trait loci. Describes the phenotype one parent shows at a single gene and the character representing that gene in
    genotype notation.
    '''
    name = ''
    dominant = False
    char = ''

    def __init__(self, **kwargs):
        '''
        Initialises the locus.

        ### Parameters
        - `name`: The name of the phenotype this parent shows at the locus (e.g. 'Round')
        - `dominant`: Whether or not that phenotype is the dominant one
        - `char`: The character representing the gene in genotype notation (e.g. 'L')
        '''
        self.__dict__.update(kwargs)

    def __setattr__(self, key, value):
        raise AttributeError(f'locus {self.name!r} is immutable (tried to set {key!r})')

    @property
    def dom_token(self):
        '''
        The notation for the dominant-pattern state: heterozygous or homozygous dominant, e.g. 'L_'.
        '''
        return f'{self.char}_'

    @property
    def rec_token(self):
        '''
        The notation for the homozygous recessive state, e.g. 'll'.
        '''
        return (2*self.char).lower()

    def __eq__(self, other):
        if not isinstance(other, locus): return NotImplemented
        return (self.name, self.dominant, self.char) == (other.name, other.dominant, other.char)

    def __hash__(self):
        return hash((self.name, self.dominant, self.char))

    def __str__(self):
        return f'{self.name}:{str(self.dominant).lower()}:{self.char}'

    def __repr__(self):
        return self.__str__()


class organism:
    '''
    One parent of a cross: a name and its ordered trait loci. Locus i of one parent is the same gene as locus i of the other.
    '''
    name = ''
    traits: tuple[locus, ...] = ()

    def __init__(self, name: str='', traits: list[locus]=()):
        self.__dict__.update(name=name, traits=tuple(traits))

    def __setattr__(self, key, value):
        raise AttributeError(f'organism {self.name!r} is immutable (tried to set {key!r})')

    @property
    def num_traits(self):
        return len(self.traits)

    def __eq__(self, other):
        if not isinstance(other, organism): return NotImplemented
        return (self.name, self.traits) == (other.name, other.traits)

    def __hash__(self):
        return hash((self.name, self.traits))

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'organism({self.name!r}, {list(self.traits)})'
