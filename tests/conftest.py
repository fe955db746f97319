import pytest

from appcenter_reset.utils.api_client import APIClient, APIResponse
from appcenter_reset.models.run import OrchestrationRun

OWNER = 'acme'
APP = 'mobile'
BRANCH = 'feature/login'
REFERENCE = 'main'

BUILDS_PATH = '/apps/acme/mobile/branches/feature%2Flogin/builds'
CONFIG_PATH = '/apps/acme/mobile/branches/feature%2Flogin/config'


def build_path(build_id):
    return f'/apps/acme/mobile/builds/{build_id}'


def response(status, data=None, text=None):
    return APIResponse(status, data, text if text is not None else ('' if data is None else str(data)))


class FakeAPIClient:
    """Scripted stand-in for APIClient.

    ``responses`` maps ``(method, path)`` to a response or a list of responses
    returned in order. Every call is recorded in ``calls``.
    """

    app_path = staticmethod(APIClient.app_path)

    def __init__(self, responses=None):
        self.responses = {key: list(value) if isinstance(value, list) else [value]
                          for key, value in (responses or {}).items()}
        self.calls = []

    def request(self, method, endpoint, json_data=None):
        self.calls.append((method, endpoint, json_data))
        queue = self.responses.get((method, endpoint))
        if not queue:
            raise AssertionError(f"Unexpected call {method} {endpoint}")
        result = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(result, Exception):
            raise result
        return result

    def get(self, endpoint):
        return self.request('GET', endpoint)

    def post(self, endpoint, json_data=None):
        return self.request('POST', endpoint, json_data=json_data)

    def patch(self, endpoint, json_data=None):
        return self.request('PATCH', endpoint, json_data=json_data)

    def delete(self, endpoint):
        return self.request('DELETE', endpoint)

    def methods(self):
        return [(method, endpoint) for method, endpoint, _ in self.calls]


class FakeAppCenter(FakeAPIClient):
    """Stateful fake that keeps one branch configuration like the service does."""

    def __init__(self, clone_from=None):
        super().__init__()
        self.clone_from = clone_from

    def request(self, method, endpoint, json_data=None):
        self.calls.append((method, endpoint, json_data))
        if endpoint != CONFIG_PATH:
            raise AssertionError(f"Unexpected call {method} {endpoint}")
        if method == 'GET':
            if self.clone_from is None:
                return response(404)
            return response(200, {'cloneFromBranch': self.clone_from})
        if method == 'DELETE':
            self.clone_from = None
            return response(200)
        if method == 'POST':
            if self.clone_from is not None:
                return response(409, text='configuration already exists')
            self.clone_from = json_data['cloneFromBranch']
            return response(200, {'cloneFromBranch': self.clone_from})
        raise AssertionError(f"Unexpected call {method} {endpoint}")


class RecordingReporter:
    """Collects notices, outputs and failures instead of printing them."""

    def __init__(self):
        self.notices = []
        self.outputs = {}
        self.failures = []

    def notify(self, message):
        self.notices.append(message)

    def publish(self, name, value):
        self.outputs[name] = value

    def fail(self, message):
        self.failures.append(message)


@pytest.fixture
def run():
    return OrchestrationRun('secret-token', OWNER, APP, BRANCH, REFERENCE)


@pytest.fixture
def reporter():
    return RecordingReporter()
