import pytest
from _pytest.nodes import Item

from capi_test_infra.logger import log


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item: Item, call):
    outcome = yield
    result = outcome.get_result()

    setattr(item, "result_" + result.when, result)


@pytest.fixture(autouse=True)
def log_test_name(request):
    log.info(f"--- TEST STARTED --- {request.node.nodeid}")
    yield
    log.info(f"--- TEST FINISHED --- {request.node.nodeid}")
