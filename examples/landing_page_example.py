"""Denormalize the landing page fixture and print the section tree."""

from pprint import pprint

from link_tree import Denormalizer, asset_path_resolver


LANDING_PAGE = {
    "settings": {
        "marketplace_id": 9999,
        "locale": "en",
        "sitename": "turbobikes",
    },
    "sections": {
        "myhero1": {
            "kind": "hero",
            "title": "Sell your turbobike",
            "subtitle": "The best place to rent your turbojopo",
            "background_image": {"type": "assets", "id": "myheroimage"},
            "search_placeholder": "What kind of turbojopo are you looking for?",
            "search_button": "Search",
        },
        "thecategories": {"type": "categories", "slogan": "blaablaa", "category_ids": [123, 432, 131]},
    },
    "composition": [
        {"section": {"type": "sections", "id": "myhero1"}, "disabled": False},
        {"section": {"type": "sections", "id": "myhero1"}, "disabled": False},
        {"section": {"type": "sections", "id": "myhero1"}, "disabled": True},
    ],
    "assets": {
        "myheroimage": "hero.png",
    },
}


def main() -> None:
    """Resolve the composition with asset links pointing into ``landing_page/``."""
    denormalizer = Denormalizer(link_resolvers={"assets": asset_path_resolver("landing_page")})
    print(f"{denormalizer=}")
    pprint(denormalizer.to_tree(LANDING_PAGE), sort_dicts=False)


if __name__ == "__main__":
    main()
