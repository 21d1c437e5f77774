import mock
import unittest

from parking_violations.db.database import drop_schema, init_database
from parking_violations.services.constants.exceptions import \
    APIFailureException
from parking_violations.web.app import create_app


class TestViolationRoutes(unittest.TestCase):

    def setUp(self):
        self.app = create_app({'TESTING': True, 'SECRET_KEY': 'test'})
        self.client = self.app.test_client()

    def tearDown(self):
        init_database().session.remove()
        drop_schema()

    def test_search_requires_plate_or_ticket(self):
        response = self.client.get('/api/violations?state=NY')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json(),
            {'error': 'Either license plate or ticket number is required'})

    @mock.patch(
        f'parking_violations.services.apis.open_data_service.'
        f'OpenDataService._perform_query')
    def test_search_by_plate_and_borough(self, mocked_perform_query):
        mocked_perform_query.return_value = {'data': [
            {'summons_number': '1', 'plate': 'ABC1234', 'county': 'K'},
            {'summons_number': '2', 'plate': 'ABC1234', 'county': 'NY'},
            {'summons_number': '3', 'plate': 'ABC1234', 'county': 'BK'}]}

        response = self.client.get(
            '/api/violations?licensePlate=abc1234&borough=brooklyn')

        self.assertEqual(response.status_code, 200)

        body = response.get_json()
        self.assertEqual(body['licensePlate'], 'ABC1234')
        self.assertEqual(body['totalCount'], 2)
        self.assertEqual(
            [violation['summons_number'] for violation in body['violations']],
            ['1', '3'])
        self.assertEqual(body['violations'][0]['vehicle_make'], '')

    @mock.patch(
        f'parking_violations.services.apis.open_data_service.'
        f'OpenDataService._perform_query')
    def test_search_with_unknown_borough(self, mocked_perform_query):
        mocked_perform_query.return_value = {'data': [
            {'summons_number': '1', 'county': 'K'}]}

        response = self.client.get(
            '/api/violations?ticketNumber=1&borough=Atlantis')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(),
                         {'violations': [], 'totalCount': 0, 'licensePlate': '1'})

    @mock.patch(
        f'parking_violations.services.apis.open_data_service.'
        f'OpenDataService._perform_query')
    def test_search_with_upstream_failure(self, mocked_perform_query):
        mocked_perform_query.side_effect = APIFailureException(
            'server error when accessing somewhere')

        response = self.client.get('/api/violations?licensePlate=ABC1234')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {
            'error': 'Failed to fetch violations from NYC Open Data',
            'details': 'server error when accessing somewhere',
            'violations': [],
            'totalCount': 0})

    def test_index_without_search(self):
        response = self.client.get('/')

        self.assertEqual(response.status_code, 200)
        self.assertIn(b'NYC Parking Violation Search', response.data)

    @mock.patch(
        f'parking_violations.services.apis.open_data_service.'
        f'OpenDataService._perform_query')
    def test_index_renders_formatted_times(self, mocked_perform_query):
        mocked_perform_query.return_value = {'data': [
            {'summons_number': '1234567890', 'plate': 'ABC1234', 'county': 'Q',
             'issue_date': '01/05/2024', 'violation_time': '730'}]}

        response = self.client.get('/?licensePlate=ABC1234&borough=Queens')

        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Time: 7:30 AM', response.data)
        self.assertIn(b'Date: Jan 5, 2024', response.data)
        self.assertIn(b'County: Q (Queens)', response.data)
        self.assertIn(b'Found 1 violation<', response.data)

    @mock.patch(
        f'parking_violations.services.apis.open_data_service.'
        f'OpenDataService._perform_query')
    def test_index_with_no_results(self, mocked_perform_query):
        mocked_perform_query.return_value = {'data': []}

        response = self.client.get('/?licensePlate=ABC1234')

        self.assertIn(b'No parking violations found for license plate', response.data)

    def test_index_with_missing_search_term(self):
        response = self.client.get('/?state=NY')

        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Either license plate or ticket number is required',
                      response.data)
