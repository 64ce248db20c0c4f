"""
Tests for MockMaster Record/Replay Adapter

Tests mode switching, lazy scenario loading, persistence callbacks and
request filtering.
"""

from unittest.mock import Mock

import pytest

from mockmaster.replay.adapter import AdapterConfig, AdapterMode, MockAdapter
from mockmaster.replay.recorder import add_recording_to_scenario, create_recording, create_scenario
from mockmaster.replay.replay import IncomingRequest
from mockmaster.replay.types import RecordedRequest, RecordedResponse


@pytest.fixture
def stored_scenario():
    """Scenario the load callback hands back."""
    return add_recording_to_scenario(
        create_scenario('stored'),
        create_recording(RecordedRequest(method='GET', path='/health'), RecordedResponse(status=200, body='ok'))
    )


class TestReplayMode:
    """Test adapter in replay mode."""

    def test_default_mode_is_replay(self):
        """Test adapters replay unless configured otherwise."""
        adapter = MockAdapter()

        assert adapter.mode == AdapterMode.REPLAY
        assert adapter.scenario.name == 'default'

    def test_replays_loaded_scenario(self, stored_scenario):
        """Test recordings from the load callback are replayed."""
        load = Mock(return_value=stored_scenario)
        adapter = MockAdapter(AdapterConfig(scenario='stored', load_recordings=load))

        response = adapter.handle(IncomingRequest(method='GET', path='/health'))

        assert response.body == 'ok'
        load.assert_called_once_with('stored')

    def test_loads_once(self, stored_scenario):
        """Test the scenario is cached after first use."""
        load = Mock(return_value=stored_scenario)
        adapter = MockAdapter(AdapterConfig(load_recordings=load))

        adapter.handle(IncomingRequest(method='GET', path='/health'))
        adapter.handle(IncomingRequest(method='GET', path='/health'))

        assert load.call_count == 1

    def test_reload(self, stored_scenario):
        """Test reload forces the next access to load again."""
        load = Mock(return_value=stored_scenario)
        adapter = MockAdapter(AdapterConfig(load_recordings=load))

        adapter.handle(IncomingRequest(method='GET', path='/health'))
        adapter.reload()
        adapter.handle(IncomingRequest(method='GET', path='/health'))

        assert load.call_count == 2

    def test_missing_scenario_starts_empty(self):
        """Test a load callback returning None gives an empty scenario."""
        adapter = MockAdapter(AdapterConfig(scenario='new', load_recordings=lambda name: None))

        assert adapter.handle(IncomingRequest(method='GET', path='/health')) is None
        assert adapter.scenario.name == 'new'
        assert adapter.scenario.recordings == ()

    def test_record_ignored(self):
        """Test record() does nothing outside record mode."""
        persist = Mock()
        adapter = MockAdapter(AdapterConfig(persist_recordings=persist))

        assert adapter.record(RecordedRequest(method='GET', path='/a'), RecordedResponse(status=200)) is None
        persist.assert_not_called()


class TestRecordMode:
    """Test adapter in record mode."""

    def test_records_and_persists(self):
        """Test each recording is appended and persisted."""
        persist = Mock()
        adapter = MockAdapter(AdapterConfig(mode=AdapterMode.RECORD, scenario='rec', persist_recordings=persist))

        recording = adapter.record(RecordedRequest(method='GET', path='/a'), RecordedResponse(status=200))

        assert adapter.scenario.recordings == (recording,)
        saved = persist.call_args[0][0]
        assert saved.name == 'rec'
        assert saved.recordings == (recording,)

    def test_fills_url_from_base_url(self):
        """Test missing URLs are built from base_url."""
        adapter = MockAdapter(AdapterConfig(mode=AdapterMode.RECORD, base_url='https://api.example.com/'))

        recording = adapter.record(RecordedRequest(method='GET', path='/users'), RecordedResponse(status=200))

        assert recording.request.url == 'https://api.example.com/users'

    def test_keeps_explicit_url(self):
        """Test URLs already present are left alone."""
        adapter = MockAdapter(AdapterConfig(mode=AdapterMode.RECORD, base_url='https://api.example.com'))

        recording = adapter.record(
            RecordedRequest(method='GET', path='/users', url='http://localhost/users'),
            RecordedResponse(status=200)
        )

        assert recording.request.url == 'http://localhost/users'

    def test_request_matcher_filters(self):
        """Test requests rejected by request_matcher are not recorded."""
        adapter = MockAdapter(AdapterConfig(
            mode=AdapterMode.RECORD,
            request_matcher=lambda req: req.path.startswith('/api')
        ))

        assert adapter.record(RecordedRequest(method='GET', path='/static/app.js'),
                              RecordedResponse(status=200)) is None
        assert adapter.record(RecordedRequest(method='GET', path='/api/users'),
                              RecordedResponse(status=200)) is not None
        assert len(adapter.scenario.recordings) == 1

    def test_handle_passes_through(self):
        """Test handle() returns None while recording."""
        adapter = MockAdapter(AdapterConfig(mode=AdapterMode.RECORD))
        adapter.record(RecordedRequest(method='GET', path='/a'), RecordedResponse(status=200))

        assert adapter.handle(IncomingRequest(method='GET', path='/a')) is None

    def test_mode_accepts_string(self):
        """Test plain string modes are converted."""
        adapter = MockAdapter(AdapterConfig(mode='record'))

        assert adapter.mode == AdapterMode.RECORD


class TestPassthroughMode:
    """Test adapter in passthrough mode."""

    def test_does_nothing(self, stored_scenario):
        """Test neither replay nor record happen."""
        adapter = MockAdapter(AdapterConfig(mode=AdapterMode.PASSTHROUGH, load_recordings=lambda n: stored_scenario))

        assert adapter.handle(IncomingRequest(method='GET', path='/health')) is None
        assert adapter.record(RecordedRequest(method='GET', path='/a'), RecordedResponse(status=200)) is None


class TestReplayAfterRecording:
    """Test switching a recorded scenario to replay."""

    def test_recorded_then_replayed(self):
        """Test recordings persisted by one adapter replay in another."""
        store = {}
        recorder = MockAdapter(AdapterConfig(
            mode=AdapterMode.RECORD,
            scenario='flow',
            persist_recordings=lambda s: store.__setitem__(s.name, s)
        ))
        recorder.record(RecordedRequest(method='POST', path='/orders'), RecordedResponse(status=201, body={'id': 7}))

        replayer = MockAdapter(AdapterConfig(scenario='flow', load_recordings=store.get))

        assert replayer.handle(IncomingRequest(method='POST', path='/orders')).body == {'id': 7}
