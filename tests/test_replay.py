"""
Tests for MockMaster Replay Resolver

Tests pattern-based replay of scenario recordings, determinism and
dynamic responses.
"""

import pytest

from mockmaster.core.types import MockResponse, Responder
from mockmaster.replay.recorder import add_recording_to_scenario, create_recording, create_scenario
from mockmaster.replay.replay import (
    IncomingRequest,
    ReplayResponse,
    create_replay_handler,
    find_replay_recording,
    match_request,
)
from mockmaster.replay.types import RecordedRequest, RecordedResponse


def _scenario(*pairs):
    scenario = create_scenario('test')
    for request, response in pairs:
        scenario = add_recording_to_scenario(scenario, create_recording(request, response))
    return scenario


@pytest.fixture
def scenario():
    """Scenario with a list, a detail and a create recording."""
    return _scenario(
        (RecordedRequest(method='GET', path='/users'),
         RecordedResponse(status=200, body=[{'id': 1}, {'id': 2}])),
        (RecordedRequest(method='GET', path='/users/:id'),
         RecordedResponse(status=200, status_text='OK', headers={'Content-Type': 'application/json'},
                          body={'id': 1, 'name': 'Ada'})),
        (RecordedRequest(method='POST', path='/users'),
         RecordedResponse(status=201, body={'id': 3})),
    )


class TestMatchRequest:
    """Test match_request."""

    def test_pattern_path(self):
        """Test recorded paths are used as patterns."""
        recorded = RecordedRequest(method='GET', path='/users/:id')

        assert match_request(recorded, IncomingRequest(method='GET', path='/users/9')) is True
        assert match_request(recorded, IncomingRequest(method='GET', path='/users')) is False

    def test_method_case_insensitive(self):
        """Test 'get' replays a recording made for 'GET'."""
        recorded = RecordedRequest(method='GET', path='/users')

        assert match_request(recorded, IncomingRequest(method='get', path='/users')) is True

    def test_ignores_query_headers_body(self):
        """Test only method and path take part."""
        recorded = RecordedRequest(method='POST', path='/users', query={'a': '1'},
                                   headers={'X': 'y'}, body={'name': 'A'})
        incoming = IncomingRequest(method='POST', path='/users', query={'b': '2'}, body='other')

        assert match_request(recorded, incoming) is True


class TestReplayHandler:
    """Test create_replay_handler."""

    def test_matches_second_recording(self, scenario):
        """Test a parameterized recording answers concrete paths."""
        handler = create_replay_handler(scenario)

        response = handler(IncomingRequest(method='GET', path='/users/1'))

        assert response.status == 200
        assert response.body == {'id': 1, 'name': 'Ada'}
        assert response.status_text == 'OK'
        assert response.headers == {'Content-Type': 'application/json'}

    def test_no_match_returns_none(self, scenario):
        """Test unmatched requests resolve to None."""
        handler = create_replay_handler(scenario)

        assert handler(IncomingRequest(method='DELETE', path='/users/1')) is None
        assert handler(IncomingRequest(method='GET', path='/orders')) is None

    def test_deterministic(self, scenario):
        """Test the same request always resolves the same way."""
        handler = create_replay_handler(scenario)
        request = IncomingRequest(method='GET', path='/users/5')

        results = [handler(request) for _ in range(5)]

        assert all(r == results[0] for r in results)
        assert create_replay_handler(scenario)(request) == results[0]

    def test_first_recording_wins(self):
        """Test insertion order decides between overlapping recordings."""
        scenario = _scenario(
            (RecordedRequest(method='GET', path='/items/*'), RecordedResponse(status=200, body='wild')),
            (RecordedRequest(method='GET', path='/items/1'), RecordedResponse(status=200, body='exact')),
        )

        assert create_replay_handler(scenario)(IncomingRequest(method='GET', path='/items/1')).body == 'wild'

    def test_lowercase_method(self, scenario):
        """Test lowercase incoming methods are replayed."""
        response = create_replay_handler(scenario)(IncomingRequest(method='post', path='/users'))

        assert response.status == 201

    def test_empty_scenario(self):
        """Test an empty scenario never matches."""
        handler = create_replay_handler(create_scenario('empty'))

        assert handler(IncomingRequest(method='GET', path='/')) is None

    def test_dynamic_response_sees_request(self):
        """Test Responders run per call with the incoming request."""
        scenario = _scenario(
            (RecordedRequest(method='POST', path='/echo'),
             Responder(lambda req: MockResponse(status=200, body=req.body))),
        )
        handler = create_replay_handler(scenario)

        first = handler(IncomingRequest(method='POST', path='/echo', body={'n': 1}))
        second = handler(IncomingRequest(method='POST', path='/echo', body={'n': 2}))

        assert first.body == {'n': 1}
        assert second.body == {'n': 2}

    def test_responder_returning_dict(self):
        """Test a responder that returns a plain dict fails with TypeError."""
        scenario = _scenario(
            (RecordedRequest(method='GET', path='/raw'), Responder(lambda req: {'status': 200})),
        )
        handler = create_replay_handler(scenario)

        with pytest.raises(TypeError, match='dict'):
            handler(IncomingRequest(method='GET', path='/raw'))

    def test_handler_keeps_its_scenario(self, scenario):
        """Test later appends do not affect an existing handler."""
        handler = create_replay_handler(scenario)
        extended = add_recording_to_scenario(
            scenario,
            create_recording(RecordedRequest(method='GET', path='/orders'), RecordedResponse(status=200))
        )

        assert handler(IncomingRequest(method='GET', path='/orders')) is None
        assert create_replay_handler(extended)(IncomingRequest(method='GET', path='/orders')) is not None


class TestFindReplayRecording:
    """Test find_replay_recording."""

    def test_returns_recording(self, scenario):
        """Test the matched recording itself is returned."""
        recording = find_replay_recording(scenario, IncomingRequest(method='GET', path='/users/2'))

        assert recording is scenario.recordings[1]


class TestReplayResponse:
    """Test ReplayResponse conversion."""

    def test_to_dict_minimal(self):
        """Test status and body are always present."""
        assert ReplayResponse(status=204).to_dict() == {'status': 204, 'body': None}

    def test_to_dict_full(self):
        """Test optional fields appear when set."""
        data = ReplayResponse(status=200, body='x', status_text='OK', headers={'A': 'b'}).to_dict()

        assert data == {'status': 200, 'body': 'x', 'statusText': 'OK', 'headers': {'A': 'b'}}

    def test_from_mock_response(self):
        """Test MockResponse values convert without status_text."""
        response = ReplayResponse.from_response(MockResponse(status=418, body='teapot'))

        assert response.status == 418
        assert response.status_text is None
