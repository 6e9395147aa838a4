import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as PolygonPatch
from matplotlib import colormaps
import warnings


def plot_preview(room, previews, fig=None, ax=None, colormap="plasma", title=None):
    """
    Debug view of a lighting preview: walls, lit regions and obstacle shadows.

    Each light's visibility polygon gets its own colour from `colormap`;
    shadows are drawn in grey with opacity equal to their strength.
    """
    if colormap not in list(colormaps):
        raise ValueError(f"{colormap} is not a valid colormap.")
    cmap = colormaps[colormap]

    if fig is None:
        if ax is None:
            fig, ax = plt.subplots()
        else:
            fig = plt.gcf()
    else:
        if ax is None:
            ax = fig.axes[0]

    if not previews:
        warnings.warn("No lights to plot.", stacklevel=2)

    n = max(len(previews), 1)
    for i, (light_id, preview) in enumerate(previews.items()):
        color = cmap(i / n)
        if not preview.visibility.is_empty:
            ax.add_patch(
                PolygonPatch(
                    preview.visibility.as_array(),
                    closed=True,
                    facecolor=color,
                    alpha=0.25,
                    edgecolor="none",
                )
            )
        for shadow in preview.shadows:
            ax.add_patch(
                PolygonPatch(
                    [tuple(p) for p in shadow.vertices],
                    closed=True,
                    facecolor="0.2",
                    alpha=shadow.strength,
                    edgecolor="none",
                )
            )
        ax.plot(preview.light.position.x, preview.light.position.y, "o", color=color)
        ax.annotate(light_id, tuple(preview.light.position), fontsize=8)

    for wall in room.walls:
        ax.plot([wall.start.x, wall.end.x], [wall.start.y, wall.end.y], "k-", lw=2)
    for obstacle in room.obstacles:
        full = obstacle.is_full_height(room.ceiling_height)
        for wall in obstacle.walls:
            ax.plot(
                [wall.start.x, wall.end.x],
                [wall.start.y, wall.end.y],
                "k-" if full else "k--",
                lw=1.5,
            )

    bounds = room.bounds()
    ax.set_xlim(bounds.min_x, bounds.max_x)
    ax.set_ylim(bounds.min_y, bounds.max_y)
    ax.set_aspect("equal")
    ax.set_title("" if title is None else title)
    return fig, ax
