"""
Pytest configuration and shared fixtures for parmlist tests.
"""

import pytest
from parmlist.parms import ParmList
from parmlist.config.schema import ParmSpec


@pytest.fixture
def table_options():
    """Options for a table-drawing call with every option in use."""
    return {
        "-parms": {"-BGColor": "#ff0000", "-Border": 2},
        "-legal": ["-textcolor", "-border", "-cellpadding"],
        "-required": ["-bgcolor"],
        "-defaults": {"-bgcolor": "#ffffff", "-textcolor": "#000000"},
    }


@pytest.fixture
def table_parms(table_options):
    """ParmList built from table_options."""
    return ParmList.new(table_options)


@pytest.fixture
def open_parms():
    """ParmList with no allow-list declared."""
    return ParmList({"-Color": "red", "-size": 3, "-tags": ["a", "b"]})


@pytest.fixture
def table_spec():
    """ParmSpec equivalent to table_options without the parms."""
    return ParmSpec(
        legal=["-textcolor", "-border", "-cellpadding"],
        required=["-bgcolor"],
        defaults={"-bgcolor": "#ffffff", "-textcolor": "#000000"},
    )
