# 네이밍 변환 단위 테스트
# 실행: pytest tests/test_naming.py -v

import pytest

from entity_agent.naming import capitalize, java_identifier, snake_to_camel, snake_to_pascal, split_words


@pytest.mark.unit
class TestSnakeToCamel:

    @pytest.mark.parametrize("name, expected", [
        ("user_name", "userName"),
        ("USER_NAME", "userName"),
        ("id", "id"),
        ("ID", "id"),
        ("created_at", "createdAt"),
        ("is_active", "isActive"),
        ("address_line_2", "addressLine2"),
        ("userName", "userName"),
        ("UserName", "userName"),
        ("foo__bar", "fooBar"),
        ("_hidden", "hidden"),
    ])
    def test_converts(self, name, expected):
        assert snake_to_camel(name) == expected

    @pytest.mark.parametrize("name", [
        "user_name", "USER_ACCOUNT_ID", "userName", "HTMLParser", "a_1_b_c", "x2_y", "created_at",
    ])
    def test_is_idempotent(self, name):
        once = snake_to_camel(name)
        assert snake_to_camel(once) == once

    def test_deterministic(self):
        assert snake_to_camel("order_total") == snake_to_camel("order_total")

    def test_only_separators_returns_input(self):
        assert snake_to_camel("___") == "___"


@pytest.mark.unit
class TestSnakeToPascal:

    @pytest.mark.parametrize("name, expected", [
        ("user_account", "UserAccount"),
        ("USER_ACCOUNT", "UserAccount"),
        ("orders", "Orders"),
        ("order_items", "OrderItems"),
    ])
    def test_converts(self, name, expected):
        assert snake_to_pascal(name) == expected

    def test_no_underscores_left(self):
        assert "_" not in snake_to_pascal("a_b_c_d")


@pytest.mark.unit
class TestHelpers:

    def test_split_words_acronym(self):
        assert split_words("HTMLParser") == ["HTML", "Parser"]

    def test_split_words_mixed(self):
        assert split_words("user_accountId") == ["user", "account", "Id"]

    def test_capitalize_keeps_rest(self):
        assert capitalize("userName") == "UserName"
        assert capitalize("") == ""

    @pytest.mark.parametrize("name, expected", [
        ("class", "class_"),
        ("default", "default_"),
        ("1stCol", "_1stCol"),
        ("order", "order"),
        ("userName", "userName"),
    ])
    def test_java_identifier(self, name, expected):
        assert java_identifier(name) == expected
