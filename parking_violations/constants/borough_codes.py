from types import MappingProxyType

ALL_BOROUGHS = 'ALL BOROUGHS'

# county codes as they appear in the open data violations datasets
BOROUGH_CODES = MappingProxyType({
    'MANHATTAN': frozenset(['NY', 'MN']),
    'BROOKLYN': frozenset(['K', 'BK']),
    'QUEENS': frozenset(['Q', 'QN', 'QUEENS']),
    'BRONX': frozenset(['BX']),
    'STATEN ISLAND': frozenset(['R', 'ST']),
})
