"""Top-level conftest.py"""

# pylint: disable=missing-function-docstring,redefined-outer-name
import random
import string
import pytest


def randomstr(length: int = 16, lowercase: bool = False):
    """Generate a random string"""
    letters = string.ascii_uppercase
    if lowercase:
        letters = string.ascii_lowercase
    return str(''.join(random.choices(letters + string.digits, k=length)))


@pytest.fixture(scope='module')
def prefix():
    """Return a random prefix"""
    return randomstr(length=8, lowercase=True)


@pytest.fixture(scope='module')
def uniq():
    """Return a random uniq value"""
    return randomstr(length=8, lowercase=True)


@pytest.fixture(scope='module')
def namecore(prefix, uniq):
    def _namecore(kind):
        return f'{prefix}-{kind}-{uniq}'

    return _namecore
