import pytest

from vecstate.entities.data.vector import Vector2D, Vector3D


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions
# with all values in the below sets.
# For example, a function with the parameter name vector_cls
# will be tested once with Vector2D and once with Vector3D.
# The key type for this dictionary is a tuple so that multiple
# parameter names can share the same test value sets.
parameter_values = {
    ("vector_cls",): {  # Both dimensionalities share one design, always run both
        "quick": [Vector2D, Vector3D],
        "full": [Vector2D, Vector3D],
    },
    ("history_length",): {"quick": [1, 3], "full": range(1, 6)},
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])


@pytest.fixture
def sample_coords(vector_cls):
    """Distinct non-zero coordinates sized for ``vector_cls``."""
    return [3.0, -2.0, 7.5][: vector_cls.DIMENSIONS]
