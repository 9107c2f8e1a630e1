"""Render HTML fragments and region visibility from a session snapshot."""

from dataclasses import dataclass, field

from jinja2 import Environment, PackageLoader, select_autoescape

from medicine_cabinet.client.state import SessionSnapshot, View
from medicine_cabinet.schemas.strain import StrainResponse

SATIVA = "Sativa"
INDICA = "Indica"
HYBRID = "Hybrid"

# Page regions, named after the js-* hooks of the page shell.
INTRO = "intro"
LOGIN = "login"
REGISTER = "register"
NAV = "nav"
MESSAGE = "message"
MESSAGE_SUCCESS = "message-success"
CABINET_FORM = "cabinet-form"
CABINET = "cabinet"
SINGLE_STRAIN = "single-strain"
CREATE_STRAIN = "create-strain"

_VIEW_REGIONS: dict[View, frozenset[str]] = {
    View.LOGIN: frozenset({INTRO, LOGIN}),
    View.REGISTER: frozenset({REGISTER}),
    View.CABINET: frozenset({NAV, CABINET_FORM, CABINET}),
    View.STRAIN_DETAIL: frozenset({NAV, SINGLE_STRAIN}),
    View.CREATE_STRAIN: frozenset({NAV, CREATE_STRAIN}),
}


def type_bucket(strain_type: str | None) -> str:
    """Display bucket for a strain type: Sativa and Indica match case-insensitively, anything else is Hybrid."""
    normalized = (strain_type or "").strip().lower()
    if normalized == "sativa":
        return SATIVA
    if normalized == "indica":
        return INDICA
    return HYBRID


_env = Environment(
    loader=PackageLoader("medicine_cabinet.client", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["type_bucket"] = type_bucket


def render_strain_dropdown(strains: tuple[StrainResponse, ...] | list[StrainResponse]) -> str:
    """Catalog select; option values are indexes into the catalog."""
    return _env.get_template("strain_dropdown.html").render(strains=strains)


def render_cabinet(strains: tuple[StrainResponse, ...] | list[StrainResponse]) -> str:
    return _env.get_template("cabinet.html").render(strains=strains)


def render_strain_detail(strain: StrainResponse, current_user: str | None) -> str:
    """Strain details; the remove control is only rendered on the current user's comments."""
    return _env.get_template("strain_detail.html").render(
        strain=strain, current_user=current_user
    )


def render_message(text: str, css_class: str = "message") -> str:
    return _env.get_template("message.html").render(text=text, css_class=css_class)


@dataclass(frozen=True)
class RenderedPage:
    """Fragments keyed by region, plus the set of regions that should be shown."""

    fragments: dict[str, str] = field(default_factory=dict)
    visible: frozenset[str] = frozenset()


def visible_regions(snapshot: SessionSnapshot) -> frozenset[str]:
    view = snapshot.view
    if not snapshot.authenticated and view not in (View.LOGIN, View.REGISTER):
        view = View.LOGIN
    regions = set(_VIEW_REGIONS[view])
    if snapshot.error:
        regions.add(MESSAGE)
    if snapshot.success:
        regions.add(MESSAGE_SUCCESS)
    return frozenset(regions)


def render_page(snapshot: SessionSnapshot) -> RenderedPage:
    """Render every dynamic region the snapshot has data for."""
    fragments: dict[str, str] = {}
    if snapshot.strains is not None:
        fragments[CABINET_FORM] = render_strain_dropdown(snapshot.strains)
    if snapshot.user_strains is not None:
        fragments[CABINET] = render_cabinet(snapshot.user_strains)
    if snapshot.current_strain is not None:
        fragments[SINGLE_STRAIN] = render_strain_detail(
            snapshot.current_strain, snapshot.current_user
        )
    if snapshot.error:
        fragments[MESSAGE] = render_message(snapshot.error, "message")
    if snapshot.success:
        fragments[MESSAGE_SUCCESS] = render_message(snapshot.success, "message-success")
    return RenderedPage(fragments=fragments, visible=visible_regions(snapshot))
