from pytest_archon import archrule


def test_domain_independence() -> None:
    """
    Domain primitives are the foundation and must not import
    the filter engine or the principle pages.
    """
    (
        archrule("domain_is_independent")
        .match("solid_principles.domain*")
        .should_not_import("solid_principles.specifications*")
        .should_not_import("solid_principles.principles*")
        .check("solid_principles")
    )


def test_specifications_layering() -> None:
    """
    The filter engine is reusable: it may use the domain layer but
    must not know about any illustrative page.
    """
    (
        archrule("specifications_layering")
        .match("solid_principles.specifications*")
        .should_not_import("solid_principles.principles*")
        .should_not_import("solid_principles.cli")
        .check("solid_principles")
    )


def test_pages_are_self_contained() -> None:
    """
    Each principle page stands on its own and never imports another page.
    """
    pages = [
        "single_responsibility",
        "open_closed",
        "liskov_substitution",
        "interface_segregation",
        "dependency_inversion",
    ]
    for page in pages:
        rule = archrule(f"{page}_is_self_contained").match(
            f"solid_principles.principles.{page}"
        )
        for other in pages:
            if other != page:
                rule = rule.should_not_import(f"solid_principles.principles.{other}")
        rule.check("solid_principles")
