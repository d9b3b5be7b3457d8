"""
Ranking query commands: scores, top, category, trending, recommended, popular.
"""
from abc import abstractmethod

from bellyfed_ranking.models import RankingCategory
from bellyfed_ranking.utils import render_scored_items
from .base import Command, QueryArgsMixin, register_command, QUERY_GROUP


@register_command
class ScoresCommand(QueryArgsMixin, Command):
    """Show every item of a menu item with its score breakdown."""

    name = ("scores", "score")
    group = QUERY_GROUP
    help_text = "scores <menu item> - score breakdown in file order"

    def execute(self, args: str) -> None:
        """Display all scored items for one menu item."""
        positionals, _ = self._parse_query_args(args)
        if len(positionals) != 1:
            print("Usage: scores <menu item>")
            return

        menu_item = positionals[0]
        if not self._check_menu_item(menu_item):
            return

        scored = self.ctx.service.score_menu_item(self.ctx.rankings.items, menu_item)
        render_scored_items(scored, f"Scores for {menu_item}",
                            show_rank=False, out=self.ctx.console)


@register_command
class TopCommand(QueryArgsMixin, Command):
    """Show the best scoring items of a menu item."""

    name = "top"
    group = QUERY_GROUP
    help_text = "top <menu item> [--limit N] - best scoring items"

    def execute(self, args: str) -> None:
        """Display top items."""
        positionals, limit = self._parse_query_args(args)
        if len(positionals) != 1:
            print("Usage: top <menu item> [--limit N]")
            return

        menu_item = positionals[0]
        if not self._check_menu_item(menu_item):
            return

        if limit is None:
            limit = self.ctx.default_limit

        top = self.ctx.service.get_top_items(self.ctx.rankings.items, menu_item, limit)
        render_scored_items(top, f"Top {limit} for {menu_item}", out=self.ctx.console)


@register_command
class CategoryCommand(QueryArgsMixin, Command):
    """Show items of one category for a menu item."""

    name = ("category", "cat")
    group = QUERY_GROUP
    help_text = "category <menu item> <category> - items in a category"

    def execute(self, args: str) -> None:
        """Display items in a category."""
        positionals, _ = self._parse_query_args(args)
        if len(positionals) < 2:
            print("Usage: category <menu item> <category>")
            print("Categories: " + ", ".join(c.value for c in RankingCategory))
            return

        menu_item = positionals[0]
        label = " ".join(positionals[1:])
        category = RankingCategory.parse(label)
        if category is None:
            print(f"Unknown category: '{label}'")
            print("Categories: " + ", ".join(c.value for c in RankingCategory))
            return

        if not self._check_menu_item(menu_item):
            return

        items = self.ctx.service.get_items_by_category(
            self.ctx.rankings.items, menu_item, category
        )
        render_scored_items(items, f"{category.value} for {menu_item}",
                            show_rank=False, out=self.ctx.console)


class _RankedCategoryCommand(QueryArgsMixin, Command):
    """Shared logic for trending/recommended/popular."""

    group = QUERY_GROUP
    category: RankingCategory = None

    @abstractmethod
    def _query(self, items, menu_item, limit):
        """Return scored items of this category, best first."""

    def execute(self, args: str) -> None:
        """Display best scoring items in this command's category."""
        positionals, limit = self._parse_query_args(args)
        if len(positionals) != 1:
            print(f"Usage: {self.name} <menu item> [--limit N]")
            return

        menu_item = positionals[0]
        if not self._check_menu_item(menu_item):
            return

        if limit is None:
            limit = self.ctx.default_limit

        results = self._query(self.ctx.rankings.items, menu_item, limit)
        render_scored_items(results, f"{self.category.value} for {menu_item}",
                            out=self.ctx.console)


@register_command
class TrendingCommand(_RankedCategoryCommand):
    """Show trending items of a menu item."""

    name = "trending"
    help_text = "trending <menu item> [--limit N] - best trending items"
    category = RankingCategory.TRENDING

    def _query(self, items, menu_item, limit):
        return self.ctx.service.get_trending_items(items, menu_item, limit)


@register_command
class RecommendedCommand(_RankedCategoryCommand):
    """Show recommended items of a menu item."""

    name = "recommended"
    help_text = "recommended <menu item> [--limit N] - best recommended items"
    category = RankingCategory.RECOMMENDED

    def _query(self, items, menu_item, limit):
        return self.ctx.service.get_recommended_items(items, menu_item, limit)


@register_command
class PopularCommand(_RankedCategoryCommand):
    """Show popular items of a menu item."""

    name = "popular"
    help_text = "popular <menu item> [--limit N] - best popular items"
    category = RankingCategory.POPULAR

    def _query(self, items, menu_item, limit):
        return self.ctx.service.get_popular_items(items, menu_item, limit)
