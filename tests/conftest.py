import matplotlib
import pytest

matplotlib.use("Agg")

from sketch_algebra.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.SILENT)
    yield
