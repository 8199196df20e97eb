"""Shared pytest fixtures for docblock tests."""

import pytest
from docblock import ParserConfig, ScanMode

SAMPLE_DOCBLOCK = """/**
* Summary.
*
* Description.
*
* @since x.x.x
*
* @param boolean $isItTrue Check if value is true.
* @param {number} $var Description.
* @return Response Add return description here. It can be multiline.
* This is the second line of the description.
*/"""

# Mixes both type conventions and a double space before the variable
FULL_DOCBLOCK = """/**
* Summary.
*
* Description.
*
* @since x.x.x
*
* @param boolean $isItTrue Check if value is true.
* @param array $args List of arguments in an array format.
* @param string  $var Description of the parameter
* @param {number} $var Description.
* @return Response Add return description here. It can be multiline.
* This is the second line of the description.
*/"""


@pytest.fixture
def sample_docblock():
    return SAMPLE_DOCBLOCK


@pytest.fixture
def full_docblock():
    return FULL_DOCBLOCK


@pytest.fixture
def compat_config():
    return ParserConfig(mode=ScanMode.COMPAT)
