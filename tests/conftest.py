import pytest

from cppjson.config import GeneratorConfig

HOGE_DOCUMENT = '{"b": 2, "a": 1, "piyo": [{"b": 1}], "fuga": {"b": 1}}'

HOGE_STRUCT = (
    "struct Hoge {\n"
    "\tint64_t a;\n"
    "\tint64_t b;\n"
    "\n"
    "\tstruct fuga {\n"
    "\t\tint64_t b;\n"
    "\t};\n"
    "\tfuga fuga;\n"
    "\n"
    "\tstruct piyo {\n"
    "\t\tint64_t b;\n"
    "\t};\n"
    "\tstd::vector<piyo> piyo;\n"
    "};\n"
)


@pytest.fixture()
def hoge_document() -> str:
    return HOGE_DOCUMENT


@pytest.fixture()
def hoge_struct() -> str:
    return HOGE_STRUCT


@pytest.fixture()
def float_config() -> GeneratorConfig:
    return GeneratorConfig(infer_integers=False)
