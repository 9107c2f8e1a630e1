"""Tests for client rendering: type buckets, fragments and region visibility."""

import unittest

from medicine_cabinet.client import render
from medicine_cabinet.client.render import render_page, type_bucket
from medicine_cabinet.client.state import SessionSnapshot, View
from medicine_cabinet.schemas.strain import CommentResponse, StrainResponse


def _strain(
    strain_id: int = 1,
    name: str = "Blue Dream",
    type: str = "Hybrid",
    comments: list[CommentResponse] | None = None,
) -> StrainResponse:
    return StrainResponse(
        id=strain_id,
        name=name,
        type=type,
        flavor="Berry",
        description="Balanced",
        comments=comments or [],
    )


class TestTypeBucket(unittest.TestCase):
    def test_sativa(self) -> None:
        for value in ("sativa", "Sativa", "SATIVA"):
            self.assertEqual(type_bucket(value), "Sativa")

    def test_indica(self) -> None:
        for value in ("indica", "Indica"):
            self.assertEqual(type_bucket(value), "Indica")

    def test_everything_else_is_hybrid(self) -> None:
        for value in ("Hybrid", "ruderalis", "", None):
            self.assertEqual(type_bucket(value), "Hybrid")


class TestStrainDetail(unittest.TestCase):
    def test_type_class(self) -> None:
        html = render.render_strain_detail(_strain(type="sativa"), "alice")
        self.assertIn('<h3 class="sativa">Sativa</h3>', html)

    def test_remove_control_only_for_author(self) -> None:
        strain = _strain(
            comments=[
                CommentResponse(id=1, content="mine", author="alice"),
                CommentResponse(id=2, content="theirs", author="bob"),
            ]
        )
        html = render.render_strain_detail(strain, "alice")
        self.assertEqual(html.count("js-remove-comment-btn"), 1)
        self.assertIn('data-index="0"', html)
        self.assertIn("Posted by bob", html)

    def test_values_are_escaped(self) -> None:
        strain = _strain(
            name="<script>x</script>",
            comments=[CommentResponse(id=1, content="<b>hi</b>", author="eve")],
        )
        html = render.render_strain_detail(strain, "alice")
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;b&gt;hi&lt;/b&gt;", html)


class TestCabinetFragments(unittest.TestCase):
    def test_cabinet_count_and_indexes(self) -> None:
        html = render.render_cabinet([_strain(1, "A"), _strain(2, "B")])
        self.assertIn("Strains in Cabinet: 2", html)
        self.assertIn('class="js-details-btn btn" data-index="1"', html)

    def test_dropdown_options(self) -> None:
        html = render.render_strain_dropdown([_strain(1, "A"), _strain(2, "B")])
        self.assertIn('<option value="0">A</option>', html)
        self.assertIn('<option value="1">B</option>', html)


class TestRenderPage(unittest.TestCase):
    def test_anonymous_shows_login(self) -> None:
        page = render_page(SessionSnapshot())
        self.assertEqual(page.visible, frozenset({render.INTRO, render.LOGIN}))
        self.assertEqual(page.fragments, {})

    def test_error_banner(self) -> None:
        page = render_page(SessionSnapshot(error="Nope"))
        self.assertIn(render.MESSAGE, page.visible)
        self.assertIn("Nope", page.fragments[render.MESSAGE])

    def test_authenticated_cabinet(self) -> None:
        snapshot = SessionSnapshot(
            token="t",
            current_user="alice",
            strains=(_strain(1, "A"),),
            user_strains=(),
            view=View.CABINET,
        )
        page = render_page(snapshot)
        self.assertEqual(
            page.visible, frozenset({render.NAV, render.CABINET_FORM, render.CABINET})
        )
        self.assertIn("Strains in Cabinet: 0", page.fragments[render.CABINET])

    def test_views_are_exclusive(self) -> None:
        snapshot = SessionSnapshot(
            token="t", current_strain=_strain(), view=View.STRAIN_DETAIL
        )
        page = render_page(snapshot)
        self.assertIn(render.SINGLE_STRAIN, page.visible)
        self.assertNotIn(render.CABINET, page.visible)

    def test_private_view_without_token_falls_back_to_login(self) -> None:
        page = render_page(SessionSnapshot(view=View.CABINET))
        self.assertIn(render.LOGIN, page.visible)
        self.assertNotIn(render.NAV, page.visible)


if __name__ == "__main__":
    unittest.main()
