from typing import Iterator

from diningplan.infra.Menu_Provider import NutrisliceMenuProvider


def get_menu_provider() -> Iterator[NutrisliceMenuProvider]:
    """FastAPI dependency yielding a menu provider; overridden in tests."""
    with NutrisliceMenuProvider() as provider:
        yield provider
