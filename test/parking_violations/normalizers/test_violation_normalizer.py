import ddt
import unittest

from dataclasses import fields

from parking_violations.constants.open_data.needed_fields import \
    VIOLATION_FIELD_ALIASES
from parking_violations.models.parking_violation import ParkingViolation
from parking_violations.normalizers.violation_normalizer import \
    normalize_violation, normalize_violations


@ddt.ddt
class TestViolationNormalizer(unittest.TestCase):

    def test_aliases_cover_every_attribute(self):
        attribute_names = [field.name for field in fields(ParkingViolation)]

        self.assertEqual(list(VIOLATION_FIELD_ALIASES.keys()), attribute_names)

        for attribute, aliases in VIOLATION_FIELD_ALIASES.items():
            self.assertEqual(aliases[0], attribute)

    def test_normalize_empty_record(self):
        violation = normalize_violation({})

        self.assertEqual(violation, ParkingViolation())

        for field in fields(ParkingViolation):
            self.assertEqual(getattr(violation, field.name), '')

    @ddt.data(None, 'not a record', 42, ['plate', 'ABC1234'])
    def test_normalize_non_mapping_record(self, raw):
        self.assertEqual(normalize_violation(raw), ParkingViolation())

    def test_normalize_open_parking_and_camera_violations_record(self):
        raw = {
            'amount_due': '0',
            'county': 'K',
            'fine_amount': '115',
            'issue_date': '01/05/2024',
            'issuing_agency': 'TRAFFIC',
            'license_type': 'PAS',
            'plate': 'ABC1234',
            'precinct': '078',
            'state': 'NY',
            'summons_number': 1234567890,
            'violation': 'NO PARKING-STREET CLEANING',
            'violation_time': '0730A',
        }

        violation = normalize_violation(raw)

        self.assertEqual(violation.summons_number, '1234567890')
        self.assertEqual(violation.plate_id, 'ABC1234')
        self.assertEqual(violation.registration_state, 'NY')
        self.assertEqual(violation.plate_type, 'PAS')
        self.assertEqual(violation.issue_date, '01/05/2024')
        self.assertEqual(violation.violation_code, 'NO PARKING-STREET CLEANING')
        self.assertEqual(violation.violation_time, '0730A')
        self.assertEqual(violation.violation_precinct, '078')
        self.assertEqual(violation.violation_county, 'K')
        self.assertEqual(violation.issuing_agency, 'TRAFFIC')
        self.assertEqual(violation.vehicle_make, '')

    def test_primary_alias_takes_precedence(self):
        violation = normalize_violation({'plate_id': 'PRIMARY', 'plate': 'SECONDARY'})

        self.assertEqual(violation.plate_id, 'PRIMARY')

    @ddt.data('', None)
    def test_empty_primary_alias_falls_back(self, primary):
        violation = normalize_violation({'plate_id': primary, 'plate': 'SECONDARY'})

        self.assertEqual(violation.plate_id, 'SECONDARY')

    @ddt.data(
        {'value': 5, 'expected': '5'},
        {'value': 5.0, 'expected': '5'},
        {'value': 5.25, 'expected': '5.25'},
        {'value': 0, 'expected': '0'},
        {'value': True, 'expected': 'true'},
        {'value': 'K', 'expected': 'K'},
    )
    @ddt.unpack
    def test_values_are_stringified(self, value, expected):
        self.assertEqual(normalize_violation({'county': value}).violation_county,
                         expected)

    def test_camel_cased_aliases(self):
        violation = normalize_violation({
            'issueDate': '2024-01-05',
            'issuingAgency': 'POLICE',
            'summonsNumber': '1',
            'violationTime': '1430P'})

        self.assertEqual(violation.issue_date, '2024-01-05')
        self.assertEqual(violation.issuing_agency, 'POLICE')
        self.assertEqual(violation.summons_number, '1')
        self.assertEqual(violation.violation_time, '1430P')

    def test_fiscal_year_database_fields_are_kept(self):
        violation = normalize_violation({
            'street_name': 'Fake Street',
            'vehicle_color': 'BLACK',
            'vehicle_make': 'FORD',
            'vehicle_year': 2017,
            'violation_description': 'NO STANDING'})

        self.assertEqual(violation.street_name, 'Fake Street')
        self.assertEqual(violation.vehicle_color, 'BLACK')
        self.assertEqual(violation.vehicle_make, 'FORD')
        self.assertEqual(violation.vehicle_year, '2017')
        self.assertEqual(violation.violation_description, 'NO STANDING')

    def test_normalize_is_idempotent(self):
        violation = normalize_violation({
            'county': 'QN',
            'plate': 'ABC1234',
            'summons_number': 99,
            'violation_time': '1200P'})

        self.assertEqual(normalize_violation(violation.to_dict()), violation)

    def test_normalize_violations_preserves_order(self):
        raws = [{'summons_number': str(number)} for number in range(5)]

        self.assertEqual(
            [violation.summons_number for violation in normalize_violations(raws)],
            ['0', '1', '2', '3', '4'])

    def test_normalize_does_not_mutate_input(self):
        raw = {'plate': 'ABC1234'}

        normalize_violation(raw)

        self.assertEqual(raw, {'plate': 'ABC1234'})
