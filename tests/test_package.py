import funclite
from funclite.core.option import NOTHING, Some
from funclite.logger import logger as logger_module


def test_top_level_exports():
    for name in funclite.__all__:
        assert hasattr(funclite, name)


def test_top_level_find_and_head_option():
    assert funclite.find([1, 2, 3], lambda n: n > 1) == Some(2)
    assert funclite.head_option([]) is NOTHING


def test_logger_submodule_is_a_module():
    assert hasattr(logger_module, "setup_logger")
    assert logger_module.logger.name == "funclite"
