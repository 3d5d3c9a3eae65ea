"""Unit tests for listing selection and display."""

import pytest
from pydantic import ValidationError

from recipe_companion.core.data import RECIPES
from recipe_companion.core.query import (
    build_predicates,
    display_recipes,
    find_recipes,
    parse_options,
    select_recipes,
)
from recipe_companion.models.schemas import DisplayOptions


def names(recipes):
    return [r.name for r in recipes]


class TestParseOptions:
    """Tests for option validation."""
    
    def test_defaults(self):
        """Test missing options mean no filters and name order."""
        options = parse_options()
        
        assert options.difficulty is None
        assert options.max_time is None
        assert options.cuisine is None
        assert options.sort_property == "name"
    
    def test_camel_case_keys(self):
        """Test the camelCase option keys are accepted."""
        options = parse_options({"maxTime": 30, "sortProperty": "time"})
        
        assert options.max_time == 30
        assert options.sort_property == "time"
    
    def test_passthrough(self):
        """Test an existing DisplayOptions is used as is."""
        options = DisplayOptions(difficulty="Hard")
        
        assert parse_options(options) is options
    
    @pytest.mark.parametrize("raw", [
        {"difficulty": "easy"},
        {"difficulty": "Trivial"},
        {"sortProperty": "ingredients"},
        {"maxTime": -1},
        {"maxTime": "20"},
        {"cuisine": 5},
        {"servings": 2},
    ])
    def test_rejects_invalid(self, raw):
        """Test bad values and unknown keys fail fast."""
        with pytest.raises(ValidationError):
            parse_options(raw)
    
    def test_predicate_order(self):
        """Test predicates are built only for present options."""
        assert build_predicates(DisplayOptions()) == []
        assert len(build_predicates(DisplayOptions(difficulty="Easy", max_time=0))) == 2


class TestSelectRecipes:
    """Tests for select_recipes."""
    
    def test_no_options_sorted_by_name(self):
        """Test the full data set comes back in name order."""
        assert names(select_recipes(RECIPES)) == [
            "Chicken Stir-Fry",
            "Pasta Carbonara",
            "Tiramisu",
            "Vegetable Soup"
        ]
    
    def test_easy_by_time(self):
        """Test easy recipes ordered by time."""
        selected = select_recipes(RECIPES, {"difficulty": "Easy", "sortProperty": "time"})
        
        assert names(selected) == ["Chicken Stir-Fry", "Vegetable Soup"]
        assert [r.time for r in selected] == [15, 30]
    
    def test_max_time_zero_filters(self):
        """Test a zero time limit is applied, not ignored."""
        assert select_recipes(RECIPES, {"maxTime": 0}) == []
    
    def test_max_time(self):
        """Test the time limit is inclusive."""
        assert names(select_recipes(RECIPES, {"maxTime": 20})) == [
            "Chicken Stir-Fry",
            "Pasta Carbonara"
        ]
    
    def test_all_filters_combined(self):
        """Test difficulty, time and cuisine together."""
        selected = select_recipes(
            RECIPES,
            DisplayOptions(difficulty="Medium", max_time=20, cuisine="Italian")
        )
        
        assert names(selected) == ["Pasta Carbonara"]
    
    def test_no_match(self):
        """Test filters that exclude everything."""
        assert select_recipes(RECIPES, {"cuisine": "French"}) == []
    
    def test_returns_new_list(self, recipes):
        """Test the source list is never reordered between calls."""
        before = list(recipes)
        
        by_time = select_recipes(recipes, {"sortProperty": "time"})
        by_name = select_recipes(recipes, {"sortProperty": "name"})
        
        assert recipes == before
        assert by_time is not recipes
        assert names(by_time) != names(by_name)
    
    def test_accepts_tuple(self):
        """Test the immutable data set can be passed directly."""
        assert len(select_recipes(RECIPES, {"sortProperty": "id"})) == len(RECIPES)


class TestDisplayRecipes:
    """Tests for display_recipes."""
    
    def test_default_renders_markup(self):
        """Test the default renderer produces card markup in order."""
        html = display_recipes(RECIPES, {"difficulty": "Easy", "sortProperty": "time"})
        
        assert html.count('class="recipe-card"') == 2
        assert html.index("Chicken Stir-Fry") < html.index("Vegetable Soup")
        assert "Tiramisu" not in html
    
    def test_custom_renderer(self):
        """Test the ordered list is handed to a custom renderer."""
        received = []
        
        result = display_recipes(RECIPES, {"maxTime": 20}, render=lambda rs: received.extend(rs) or "done")
        
        assert result == "done"
        assert names(received) == ["Chicken Stir-Fry", "Pasta Carbonara"]
    
    def test_invalid_options_raise(self):
        """Test invalid options raise before rendering."""
        with pytest.raises(ValidationError):
            display_recipes(RECIPES, {"sortProperty": "calories"}, render=pytest.fail)


class TestFindRecipes:
    """Tests for find_recipes."""
    
    def test_search(self):
        """Test search keeps data order."""
        assert names(find_recipes(RECIPES, "eggs")) == ["Pasta Carbonara", "Tiramisu"]
    
    def test_empty_query(self):
        """Test the empty query returns everything."""
        assert find_recipes(RECIPES, "") == list(RECIPES)
