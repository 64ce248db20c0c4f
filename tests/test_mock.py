"""
Tests for MockMaster Mock Registry

Tests first-match lookup, method comparison, dynamic responders and
registry bookkeeping.
"""

import re

import pytest

from mockmaster.core.ids import generate_id, to_base36
from mockmaster.core.mock import (
    MockRegistry,
    create_mock,
    find_matching_mock,
    match_method,
    resolve_response,
)
from mockmaster.core.types import HttpMethod, MockRequest, MockResponse, Responder


@pytest.fixture
def registry():
    """Registry with a small set of user routes."""
    reg = MockRegistry()
    reg.add(create_mock('/users/:id', 'GET', MockResponse(status=200, body={'kind': 'one'}), id='get-one'))
    reg.add(create_mock('/users/*', 'GET', MockResponse(status=200, body={'kind': 'wild'}), id='get-wild'))
    reg.add(create_mock('/users', 'POST', MockResponse(status=201), id='create'))
    return reg


class TestMatchMethod:
    """Test HTTP method comparison."""

    @pytest.mark.parametrize('expected,actual', [
        ('GET', 'GET'),
        ('GET', 'get'),
        ('post', 'POST'),
        (HttpMethod.DELETE, 'delete'),
    ])
    def test_case_insensitive(self, expected, actual):
        """Test methods compare without regard to case."""
        assert match_method(expected, actual) is True

    def test_different_methods(self):
        """Test different verbs never match."""
        assert match_method('GET', 'POST') is False


class TestFindMatchingMock:
    """Test first-match lookup."""

    def test_empty_list(self):
        """Test nothing matches in an empty list."""
        assert find_matching_mock([], MockRequest(method='GET', path='/users')) is None

    def test_first_match_wins(self, registry):
        """Test earlier mocks shadow later, broader ones."""
        mock = find_matching_mock(registry.snapshot(), MockRequest(method='GET', path='/users/1'))

        assert mock.id == 'get-one'

    def test_order_is_not_specificity(self):
        """Test a broad pattern registered first wins over an exact one."""
        mocks = [
            create_mock('/users/*', 'GET', MockResponse(status=200), id='wild'),
            create_mock('/users/1', 'GET', MockResponse(status=200), id='exact'),
        ]

        mock = find_matching_mock(mocks, MockRequest(method='GET', path='/users/1'))

        assert mock.id == 'wild'

    def test_method_filters(self, registry):
        """Test path match alone is not enough."""
        assert find_matching_mock(registry.snapshot(), MockRequest(method='DELETE', path='/users/1')) is None

    def test_lowercase_request_method(self, registry):
        """Test lowercase request methods hit uppercase mocks."""
        mock = find_matching_mock(registry.snapshot(), MockRequest(method='post', path='/users'))

        assert mock.id == 'create'


class TestCreateMock:
    """Test mock construction."""

    def test_generates_id(self):
        """Test an ID is generated when none is given."""
        mock = create_mock('/a', 'get', MockResponse(status=204))

        assert mock.id
        assert mock.method == 'GET'
        assert mock.is_dynamic is False

    def test_wraps_callable(self):
        """Test plain callables become Responders."""
        mock = create_mock('/echo', 'POST', lambda req: MockResponse(status=200, body=req.body))

        assert isinstance(mock.response, Responder)
        assert mock.is_dynamic is True

    def test_accepts_enum_method(self):
        """Test HttpMethod values are stored as plain strings."""
        mock = create_mock('/a', HttpMethod.PATCH, MockResponse(status=200))

        assert mock.method == 'PATCH'


class TestResolveResponse:
    """Test response resolution."""

    def test_static_response_returned_as_is(self):
        """Test static responses are not copied."""
        response = MockResponse(status=200, body=[1, 2])

        assert resolve_response(response, MockRequest(method='GET', path='/')) is response

    def test_responder_called_with_request(self):
        """Test dynamic responses see the request."""
        responder = Responder(lambda req: MockResponse(status=200, body={'path': req.path}))

        response = resolve_response(responder, MockRequest(method='GET', path='/who'))

        assert response.body == {'path': '/who'}


class TestMockRegistry:
    """Test MockRegistry."""

    def test_resolve(self, registry):
        """Test resolve returns the first match's response."""
        response = registry.resolve(MockRequest(method='GET', path='/users/7'))

        assert response.status == 200
        assert response.body == {'kind': 'one'}

    def test_resolve_miss(self, registry):
        """Test resolve returns None when nothing matches."""
        assert registry.resolve(MockRequest(method='GET', path='/orders')) is None

    def test_responder_is_lazy(self):
        """Test responders only run when their mock matches."""
        calls = []

        def respond(req):
            calls.append(req.path)
            return MockResponse(status=200)

        registry = MockRegistry()
        registry.add(create_mock('/lazy/:id', 'GET', respond))

        registry.resolve(MockRequest(method='GET', path='/other'))
        assert calls == []

        registry.resolve(MockRequest(method='GET', path='/lazy/1'))
        assert calls == ['/lazy/1']

    def test_remove(self, registry):
        """Test removing a mock by ID."""
        assert registry.remove('get-one') is True
        assert registry.remove('get-one') is False
        assert registry.ids() == ['get-wild', 'create']

        mock = registry.find(MockRequest(method='GET', path='/users/1'))
        assert mock.id == 'get-wild'

    def test_clear(self, registry):
        """Test clear empties the registry."""
        registry.clear()

        assert len(registry) == 0
        assert list(registry) == []

    def test_snapshot_is_stable(self, registry):
        """Test a snapshot does not change when the registry does."""
        before = registry.snapshot()
        registry.add(create_mock('/x', 'GET', MockResponse(status=200)))

        assert len(before) == 3
        assert len(registry) == 4

    def test_initial_mocks(self):
        """Test the registry can be seeded."""
        mocks = [create_mock('/a', 'GET', MockResponse(status=200), id='a')]

        assert MockRegistry(mocks).ids() == ['a']


class TestIds:
    """Test ID generation."""

    def test_base36(self):
        """Test base-36 encoding."""
        assert to_base36(0) == '0'
        assert to_base36(35) == 'z'
        assert to_base36(36) == '10'

    def test_unique(self):
        """Test 1000 IDs generated back to back are distinct."""
        ids = {generate_id() for _ in range(1000)}

        assert len(ids) == 1000

    def test_format(self):
        """Test IDs have three base-36 parts."""
        assert re.fullmatch(r'[0-9a-z]+-[0-9a-z]+-[0-9a-z]{7}', generate_id())
