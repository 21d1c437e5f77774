BOROUGH_OPTIONS = ['All Boroughs', 'Manhattan', 'Brooklyn', 'Queens', 'Bronx',
                   'Staten Island']

DISPLAY_DATE_FORMAT: str = '%b %-d, %Y'
DISPLAY_TIME_STRING = '{}:{} {}'

DUPLICATE_EMAIL_STRING = 'An account with this email already exists'
DUPLICATE_PLATE_STRING = 'This plate is already being monitored'

INVALID_CREDENTIALS_STRING = 'Invalid email or password'
INVALID_PAGINATION_STRING = 'limit and offset must be integers'

LOGGED_OUT_STRING = 'Logged out'

MISSING_EMAIL_STRING = 'Email is required'
MISSING_PLATE_FIELDS_STRING = 'Plate number and state are required'
MISSING_SEARCH_TERM_STRING = 'Either license plate or ticket number is required'

PASSWORD_TOO_SHORT_STRING = 'Password must be at least {} characters long'

PLATE_ADDED_STRING = 'Plate added successfully'
PLATE_NOT_FOUND_STRING = 'Plate not found'
PLATE_REMOVED_STRING = 'Plate removed successfully'
PLATE_UPDATED_STRING = 'Plate {} successfully'

UNAUTHORIZED_STRING = 'Unauthorized'

UPSTREAM_FAILURE_STRING = 'Failed to fetch violations from NYC Open Data'
