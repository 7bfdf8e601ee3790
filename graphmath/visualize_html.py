"""Export multiple Plotly figures to a single HTML file with tabs."""

import html
import logging
import webbrowser
from pathlib import Path
from typing import List, Tuple

import plotly.graph_objects as go

from . import config

logger = logging.getLogger(__name__)

_PAGE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <script src="{plotly_url}"></script>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 20px; background: #f5f5f5; }}
        nav {{ display: flex; gap: 5px; margin-bottom: 15px; }}
        nav button {{ padding: 8px 16px; border: none; border-radius: 4px; background: #e0e0e0; cursor: pointer; }}
        nav button.active {{ background: #4CAF50; color: white; }}
        .tab {{ background: #fff; padding: 15px; border-radius: 8px; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <nav>{buttons}</nav>
    {panels}
    <script>
        function showTab(button, tabId) {{
            document.querySelectorAll(".tab").forEach(function(tab) {{
                tab.style.display = tab.id === tabId ? "block" : "none";
            }});
            document.querySelectorAll("nav button").forEach(function(other) {{
                other.classList.toggle("active", other === button);
            }});
            // figures drawn while hidden have zero size
            document.querySelectorAll("#" + tabId + " .plotly-graph-div").forEach(function(div) {{
                Plotly.Plots.resize(div);
            }});
        }}
    </script>
</body>
</html>
"""


def export_figures_to_tabbed_html(
    figures: List[Tuple[str, go.Figure]],
    output_path: str | Path,
    title: str = "Shortest Distances",
    open_browser: bool = config.OPEN_BROWSER,
) -> Path:
    """
    Export multiple Plotly figures to a single HTML file with tabs.

    Args:
        figures: List of (tab_name, figure) tuples
        output_path: Path to save HTML file
        title: Page title
        open_browser: Open the written page in the default browser

    Returns:
        Absolute path of the written file.
    """

    buttons = []
    panels = []

    for i, (tab_name, fig) in enumerate(figures):
        active = ' class="active"' if i == 0 else ""
        display = "block" if i == 0 else "none"
        buttons.append(
            f'<button{active} onclick="showTab(this, \'tab-{i}\')">{html.escape(tab_name)}</button>'
        )
        fig_html = fig.to_html(full_html=False, include_plotlyjs=False, div_id=f"fig-{i}")
        panels.append(f'<div id="tab-{i}" class="tab" style="display:{display}">{fig_html}</div>')

    page = _PAGE.format(
        title=html.escape(title),
        plotly_url=config.PLOTLY_CDN_URL,
        buttons="".join(buttons),
        panels="\n    ".join(panels),
    )

    output_path = Path(output_path).resolve()
    output_path.write_text(page, encoding="utf-8")
    logger.info("Saved visualization to %s (%d tabs)", output_path, len(figures))

    if open_browser:
        webbrowser.open(output_path.as_uri())

    return output_path
