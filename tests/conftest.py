# pytest 공통 설정과 fixture

import pytest

from entity_agent.commands.convert import EXAMPLE_SQL
from entity_agent.options import GenerationOptions


def pytest_configure(config):
    """커스텀 marker 등록"""
    config.addinivalue_line(
        "markers", "unit: 외부 의존 없는 빠른 단위 테스트"
    )
    config.addinivalue_line(
        "markers", "cli: Typer CliRunner로 실행하는 CLI 테스트"
    )


@pytest.fixture
def example_sql():
    return EXAMPLE_SQL


@pytest.fixture
def default_options():
    return GenerationOptions()


@pytest.fixture
def plain_options():
    """어노테이션 없이 getter/setter만 생성"""
    return GenerationOptions(jpa=False, lombok=False, jackson=False, generate_accessors=True)


@pytest.fixture
def sql_file(tmp_path, example_sql):
    p = tmp_path / "user_account.sql"
    p.write_text(example_sql, encoding="utf-8")
    return p
