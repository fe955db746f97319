from appcenter_reset.operations.build_trigger import BuildTrigger
from appcenter_reset.models.result import ErrorKind
from conftest import FakeAPIClient, BUILDS_PATH, response


def test_trigger_returns_new_build_id(run, reporter):
    client = FakeAPIClient({('POST', BUILDS_PATH): response(200, {'id': 118, 'status': 'notStarted'})})

    result = BuildTrigger(client, reporter).execute(run)

    assert result.is_ok
    assert result.value == '118'
    assert client.calls == [('POST', BUILDS_PATH, {'debug': False})]
    assert reporter.notices == ['✅ Build started successfully with id: 118.']


def test_trigger_failure_is_build_trigger_error(run, reporter):
    client = FakeAPIClient({('POST', BUILDS_PATH): response(403, text='forbidden')})

    result = BuildTrigger(client, reporter).execute(run)

    assert not result.is_ok
    assert result.error.kind is ErrorKind.BUILD_TRIGGER
    assert result.error.message.startswith('❌ Error starting build.')
    assert 'status=403' in result.error.message


def test_trigger_without_id_is_build_trigger_error(run, reporter):
    client = FakeAPIClient({('POST', BUILDS_PATH): response(200, {'status': 'notStarted'})})

    result = BuildTrigger(client, reporter).execute(run)

    assert not result.is_ok
    assert result.error.kind is ErrorKind.BUILD_TRIGGER
    assert 'Response has no build id' in result.error.message
