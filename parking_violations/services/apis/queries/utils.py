import re

STRIP_EXCESS_CHARACTERS_REGEX = r'\n\s+'
UNSAFE_SEARCH_CHARACTERS_REGEX = r'[^A-Z0-9]'

def format_query_string(raw_string: str) -> str:
    return re.sub(STRIP_EXCESS_CHARACTERS_REGEX, '', raw_string)

def sanitize_search_term(raw_term: str) -> str:
    return re.sub(UNSAFE_SEARCH_CHARACTERS_REGEX, '', raw_term.upper())
