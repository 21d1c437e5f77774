# Ordered raw field names for each normalized violation attribute. The first
# alias is always the attribute itself; later ones cover the Open Parking and
# Camera Violations schema and camel-cased variants.
VIOLATION_FIELD_ALIASES = {
    'summons_number': ('summons_number', 'summonsNumber'),
    'plate_id': ('plate_id', 'plate'),
    'registration_state': ('registration_state', 'state'),
    'plate_type': ('plate_type', 'license_type'),
    'issue_date': ('issue_date', 'issueDate'),
    'violation_code': ('violation_code', 'violation'),
    'vehicle_body_type': ('vehicle_body_type',),
    'vehicle_make': ('vehicle_make',),
    'issuing_agency': ('issuing_agency', 'issuingAgency'),
    'street_code1': ('street_code1',),
    'street_code2': ('street_code2',),
    'street_code3': ('street_code3',),
    'vehicle_expiration_date': ('vehicle_expiration_date',),
    'violation_location': ('violation_location',),
    'violation_precinct': ('violation_precinct', 'precinct'),
    'issuer_precinct': ('issuer_precinct',),
    'issuer_code': ('issuer_code',),
    'issuer_command': ('issuer_command',),
    'issuer_squad': ('issuer_squad',),
    'violation_time': ('violation_time', 'violationTime'),
    'time_first_observed': ('time_first_observed',),
    'violation_county': ('violation_county', 'county'),
    'violation_in_front_of_or_opposite': ('violation_in_front_of_or_opposite',),
    'house_number': ('house_number',),
    'street_name': ('street_name',),
    'intersecting_street': ('intersecting_street',),
    'date_first_observed': ('date_first_observed',),
    'law_section': ('law_section',),
    'sub_division': ('sub_division',),
    'violation_legal_code': ('violation_legal_code',),
    'days_parking_in_effect': ('days_parking_in_effect',),
    'from_hours_in_effect': ('from_hours_in_effect',),
    'to_hours_in_effect': ('to_hours_in_effect',),
    'vehicle_color': ('vehicle_color',),
    'unregistered_vehicle': ('unregistered_vehicle',),
    'vehicle_year': ('vehicle_year',),
    'meter_number': ('meter_number',),
    'feet_from_curb': ('feet_from_curb',),
    'violation_post_code': ('violation_post_code',),
    'violation_description': ('violation_description',),
    'no_standing_or_stopping_violation': ('no_standing_or_stopping_violation',),
    'hydrant_violation': ('hydrant_violation',),
    'double_parking_violation': ('double_parking_violation',),
}
