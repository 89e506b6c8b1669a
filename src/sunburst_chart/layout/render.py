"""SVG rendering surface the chart draws into."""

import html
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .arcs import PathCommand, format_path

PointerHandler = Callable[[float, float], None]


class SurfaceNotFoundError(LookupError):
    """Raised when rendering into a container id that was never created."""


@dataclass
class SvgPath:
    """A drawn path element."""

    d: str
    fill: str
    title: str | None = None


class SvgSurface:
    """Drawing surface holding path elements and pointer handlers."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.paths: list[SvgPath] = []
        self._handlers: dict[str, list[PointerHandler]] = defaultdict(list)

    def append_path(
        self,
        description: list[PathCommand] | str,
        fill: str,
        title: str | None = None,
    ) -> SvgPath:
        """Append a filled path, drawn above everything appended before it."""
        d = description if isinstance(description, str) else format_path(description)
        path = SvgPath(d=d, fill=fill, title=title)
        self.paths.append(path)
        return path

    def bind(self, event: str, handler: PointerHandler) -> None:
        self._handlers[event].append(handler)

    def dispatch(self, event: str, x: float, y: float) -> None:
        """Deliver a pointer event at surface coordinates (x, y)."""
        for handler in list(self._handlers.get(event, [])):
            handler(x, y)

    def click(self, x: float, y: float) -> None:
        self.dispatch("click", x, y)

    def to_svg(self) -> str:
        """Serialize the surface as a standalone SVG document."""
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="0 0 {self.width} {self.height}">'
        ]
        for path in self.paths:
            fill = html.escape(path.fill, quote=True)
            if path.title:
                lines.append(
                    f'  <path fill="{fill}" d="{path.d}">'
                    f"<title>{html.escape(path.title)}</title></path>"
                )
            else:
                lines.append(f'  <path fill="{fill}" d="{path.d}"/>')
        lines.append("</svg>")
        return "\n".join(lines)


class SvgContainer:
    """Element that surfaces are created in and cleared from."""

    def __init__(self, container_id: str):
        self.id = container_id
        self.surfaces: list[SvgSurface] = []

    @property
    def surface(self) -> SvgSurface | None:
        """The most recently created surface."""
        return self.surfaces[-1] if self.surfaces else None

    def create_surface(self, width: float, height: float) -> SvgSurface:
        surface = SvgSurface(width, height)
        self.surfaces.append(surface)
        return surface

    def clear(self) -> None:
        self.surfaces.clear()


class SvgDocument:
    """Registry of containers addressed by id."""

    def __init__(self):
        self._containers: dict[str, SvgContainer] = {}

    def add_container(self, container_id: str) -> SvgContainer:
        """Create (or return the existing) container with this id."""
        if container_id not in self._containers:
            self._containers[container_id] = SvgContainer(container_id)
        return self._containers[container_id]

    def get_container(self, container_id: str) -> SvgContainer:
        """Look up a container.

        Raises:
            SurfaceNotFoundError: If no container has this id.
        """
        try:
            return self._containers[container_id]
        except KeyError:
            raise SurfaceNotFoundError(f"No container with id {container_id!r}") from None


def write_svg(surface: SvgSurface, output_path: Path) -> None:
    """Write the surface to an SVG file."""
    with open(output_path, "w") as f:
        f.write(surface.to_svg())
        f.write("\n")


def write_html(surface: SvgSurface, output_path: Path, title: str = "Sunburst chart") -> None:
    """Write the surface into a standalone HTML page.

    Args:
        surface: Surface to embed.
        output_path: Path to write the HTML file.
        title: Page title.
    """
    page = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
<style>
html, body {{ margin: 0; padding: 0; }}
svg path {{ stroke: #ffffff; stroke-width: 1; }}
</style>
</head>
<body>
{surface.to_svg()}
</body>
</html>
"""
    with open(output_path, "w") as f:
        f.write(page)
