from appcenter_reset.operations.config_reset import ConfigReset
from appcenter_reset.models.branch_config import BranchConfig
from appcenter_reset.models.result import ErrorKind
from conftest import FakeAPIClient, FakeAppCenter, CONFIG_PATH, response


def test_existing_config_is_deleted_before_create(run, reporter):
    client = FakeAPIClient({
        ('GET', CONFIG_PATH): response(200, {'cloneFromBranch': 'develop'}),
        ('DELETE', CONFIG_PATH): response(200),
        ('POST', CONFIG_PATH): response(200, {}),
    })

    result = ConfigReset(client, reporter).execute(run)

    assert result.is_ok
    assert result.value == BranchConfig('feature/login', 'main')
    assert client.methods() == [
        ('GET', CONFIG_PATH),
        ('DELETE', CONFIG_PATH),
        ('POST', CONFIG_PATH),
    ]
    assert client.calls[-1][2] == {'cloneFromBranch': 'main'}
    assert reporter.notices == ['✅ Clean previous build configuration.', '✅ Build configuration set.']


def test_missing_config_skips_delete(run, reporter):
    client = FakeAPIClient({
        ('GET', CONFIG_PATH): response(404, text='Not found'),
        ('POST', CONFIG_PATH): response(200, {}),
    })

    result = ConfigReset(client, reporter).execute(run)

    assert result.is_ok
    assert 'DELETE' not in [method for method, _ in client.methods()]
    assert reporter.notices == ['✅ Build configuration set.']


def test_lookup_failure_is_config_lookup_error(run, reporter):
    client = FakeAPIClient({('GET', CONFIG_PATH): response(503, text='unavailable')})

    result = ConfigReset(client, reporter).execute(run)

    assert not result.is_ok
    assert result.error.kind is ErrorKind.CONFIG_LOOKUP
    assert client.methods() == [('GET', CONFIG_PATH)]


def test_delete_failure_stops_before_create(run, reporter):
    client = FakeAPIClient({
        ('GET', CONFIG_PATH): response(200, {}),
        ('DELETE', CONFIG_PATH): response(500, text='nope'),
    })

    result = ConfigReset(client, reporter).execute(run)

    assert not result.is_ok
    assert result.error.kind is ErrorKind.CONFIG_DELETE
    assert 'POST' not in [method for method, _ in client.methods()]


def test_create_failure_is_config_create_error(run, reporter):
    client = FakeAPIClient({
        ('GET', CONFIG_PATH): response(404),
        ('POST', CONFIG_PATH): response(400, text='unknown branch main'),
    })

    result = ConfigReset(client, reporter).execute(run)

    assert not result.is_ok
    assert result.error.kind is ErrorKind.CONFIG_CREATE
    assert 'unknown branch main' in result.error.message


def test_reset_twice_ends_in_same_state(run, reporter):
    for initial in (None, 'develop'):
        service = FakeAppCenter(clone_from=initial)
        operation = ConfigReset(service, reporter)

        first = operation.execute(run)
        after_first = service.clone_from
        second = operation.execute(run)

        assert first.is_ok and second.is_ok
        assert after_first == service.clone_from == 'main'
        assert first.value == second.value
