"""Unit tests for lookup criteria."""

from user_directory_api.app.services.user_filters import FieldEquals, UserCriteria, UserField


class TestFromQuery:
    """Building criteria from the optional lookup parameters."""

    def test_no_parameters_gives_no_predicates(self):
        criteria = UserCriteria.from_query()

        assert criteria.predicates == ()
        assert not criteria

    def test_empty_strings_are_ignored(self):
        criteria = UserCriteria.from_query(first_name="", last_name="")

        assert criteria.predicates == ()

    def test_first_name_only(self):
        criteria = UserCriteria.from_query(first_name="Ada")

        assert criteria.predicates == (FieldEquals(UserField.FIRST_NAME, "Ada"),)

    def test_both_names_keep_their_order(self):
        criteria = UserCriteria.from_query(first_name="Ada", last_name="Lovelace")

        assert criteria.predicates == (
            FieldEquals(UserField.FIRST_NAME, "Ada"),
            FieldEquals(UserField.LAST_NAME, "Lovelace"),
        )


class TestToSql:
    """Rendering criteria as a parameterized WHERE clause."""

    def test_empty_criteria_render_nothing(self):
        assert UserCriteria().to_sql() == ("", ())

    def test_single_predicate(self):
        where, params = UserCriteria.from_query(last_name="Byron").to_sql()

        assert where == " WHERE last_name = ?"
        assert params == ("Byron",)

    def test_conjunction(self):
        where, params = UserCriteria.from_query(first_name="Ada", last_name="Lovelace").to_sql()

        assert where == " WHERE first_name = ? AND last_name = ?"
        assert params == ("Ada", "Lovelace")

    def test_values_never_reach_the_clause(self):
        hostile = "x' OR '1'='1"
        where, params = UserCriteria.from_query(first_name=hostile).to_sql()

        assert hostile not in where
        assert params == (hostile,)
