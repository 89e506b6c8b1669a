"""Sunburst chart controller: layout, drawing and click-to-zoom."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .layout.arcs import describe_arc
from .layout.colors import ColorAllocator
from .layout.geometry import Point, cartesian_to_polar
from .layout.hit import find_node
from .layout.render import SvgDocument, SvgSurface
from .layout.tree import LayoutNode, LayoutTree, compute_layout, unwrap

logger = logging.getLogger(__name__)


class ChartState(Enum):
    """Which part of the dataset is displayed."""

    TOP_LEVEL = "top-level"  # dataset root at the center
    ZOOMED = "zoomed"  # a subtree at the center


@dataclass
class ChartOptions:
    """Size and placement of a chart."""

    width: float
    height: float
    surface_id: str = "chart"
    scale: float = 1.0  # 1.62 (golden ratio) makes outer rings thinner

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Chart size must be positive, got {self.width}x{self.height}")
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")

    @property
    def size(self) -> float:
        """Diameter of the chart."""
        return min(self.width, self.height)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ChartOptions":
        """Build options from a config mapping.

        Accepts "surface-id", "surface_id" or "div" for the container id.
        """
        surface_id = values.get("surface-id", values.get("surface_id", values.get("div")))
        kwargs: dict[str, Any] = {
            "width": float(values["width"]),
            "height": float(values["height"]),
        }
        if surface_id is not None:
            kwargs["surface_id"] = str(surface_id)
        if values.get("scale") is not None:
            kwargs["scale"] = float(values["scale"])
        return cls(**kwargs)


class SunburstChart:
    """Interactive sunburst chart.

    Clicking a sector zooms into it; clicking the center of a zoomed chart
    returns to the full dataset.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        options: ChartOptions,
        document: SvgDocument | None = None,
        colors: ColorAllocator | None = None,
    ):
        self.data = data
        self.options = options
        if document is None:
            document = SvgDocument()
            document.add_container(options.surface_id)
        self.document = document
        self.colors = colors if colors is not None else ColorAllocator()

        self.root_node: Mapping[str, Any] | None = None
        self.layout: LayoutTree | None = None
        self.surface: SvgSurface | None = None
        self.starting_coordinates: Point | None = None

    @property
    def state(self) -> ChartState:
        if self.root_node is None or unwrap(self.root_node)[0] is unwrap(self.data)[0]:
            return ChartState.TOP_LEVEL
        return ChartState.ZOOMED

    def calculate_starting_coordinates(self) -> Point:
        """Center of the chart, computed on the first render only."""
        if self.starting_coordinates is None:
            radius = self.options.size / 2
            self.starting_coordinates = Point(radius, radius)
        return self.starting_coordinates

    def render(self, root: Mapping[str, Any] | None = None) -> None:
        """Lay out and redraw the chart.

        Args:
            root: Node (or wrapper) to display at the center. Defaults to the
                current display root, or the dataset on the first call.

        Raises:
            SurfaceNotFoundError: If the configured container does not exist.
            ValueError: If root is not a valid tree. The chart keeps showing
                its previous root and colors.
        """
        root_node = root or self.root_node or self.data
        container = self.document.get_container(self.options.surface_id)

        cursor = self.colors.cursor
        try:
            layout = compute_layout(
                root_node,
                scale=self.options.scale,
                chart_size=self.options.size,
                colors=self.colors,
            )
        except ValueError:
            self.colors.seek(cursor)
            raise

        self.root_node = root_node
        self.layout = layout
        origin = self.calculate_starting_coordinates()
        container.clear()
        self.surface = container.create_surface(self.options.width, self.options.height)
        self.bind_events()
        for node in self.layout.iter_preorder():
            self.surface.append_path(describe_arc(node, origin), node.color, _title(node))

        logger.debug("Rendered %d sectors (%s)", len(self.layout), self.state.value)

    def bind_events(self) -> None:
        if self.surface is None:
            return
        self.surface.bind("mousemove", self.on_pointer_move)
        self.surface.bind("click", self.on_click)

    def find_node_at(self, x: float, y: float) -> LayoutNode | None:
        """Return the laid out node under surface point (x, y), if any."""
        if self.layout is None or self.starting_coordinates is None:
            return None
        point = cartesian_to_polar(Point(x, y), self.starting_coordinates)
        return find_node(point, self.layout)

    def on_click(self, x: float, y: float) -> None:
        """Zoom into the clicked sector, or back out when the center is clicked."""
        node = self.find_node_at(x, y)
        if node is None or node.data is unwrap(self.data)[0]:
            return

        if node.data is not unwrap(self.root_node)[0]:
            self.render(self.layout.wrap(node))
        else:
            # Colors are handed out from the first palette entry again
            self.colors.reset()
            self.render(self.data)

    def on_pointer_move(self, x: float, y: float) -> None:
        """Hook for pointer movement; does nothing by default."""


def _title(node: LayoutNode) -> str:
    name = node.data.get("name")
    value = node.data.get("value")
    return f"{name}: {value}" if name is not None else f"{value}"
