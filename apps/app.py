# -*- coding: utf-8 -*-
import html
from typing import List

import gradio as gr

from artasia_atlas.container import get_container
from artasia_atlas.domain.errors import RenderingError
from artasia_atlas.domain.models import GroupKey
from artasia_atlas.observability import configure_logging
from artasia_atlas.ports.rendering import NetworkRendererPort
from artasia_atlas.services import AtlasService
from artasia_atlas.state import AtlasState

configure_logging()

CONTAINER = get_container()
SERVICE: AtlasService = CONTAINER.resolve(AtlasService)
RENDERER: NetworkRendererPort = CONTAINER.resolve(NetworkRendererPort)
RENDERING = CONTAINER.config.rendering

# ============================ STATE ============================
BASE_STATE: AtlasState = SERVICE.initial_state(
    group_by=RENDERING.default_group_by,
    show_edge_labels=RENDERING.show_edge_labels,
)

GROUP_CHOICES: List[str] = [key.value for key in GroupKey]


def _network_iframe_from_html(document_html: str, *, height_px: int = 760) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _summary(state: AtlasState) -> str:
    graph = state.graph
    if graph.is_empty:
        return "No sites to display."
    groups = len(set(state.group_updates().values()))
    return (
        f"**{len(graph.nodes)}** sites · **{len(graph.edges)}** links · "
        f"**{groups}** groups by *{state.group_by}*"
    )


def update_view(group_by: str, show_edge_labels: bool):
    state = BASE_STATE.with_grouping(group_by).with_edge_labels(show_edge_labels)
    if state.graph.is_empty:
        return _summary(state), "<p></p>"
    try:
        document = RENDERER.render_html(state)
    except RenderingError as e:
        return f"❌ {e}", "<p></p>"
    return _summary(state), _network_iframe_from_html(document)


# ============================ UI ============================
with gr.Blocks(title="Artasia Atlas") as app:
    gr.Markdown("# Artasia Atlas\nCommunity art sites, linked by partner and distance.")

    with gr.Row():
        group_dd = gr.Dropdown(
            GROUP_CHOICES, value=BASE_STATE.group_by, label="Group by"
        )
        labels_cb = gr.Checkbox(
            value=BASE_STATE.show_edge_labels, label="Show distances on links"
        )

    summary_md = gr.Markdown()
    network_view = gr.HTML(value="<p></p>")

    group_dd.change(
        update_view, inputs=[group_dd, labels_cb], outputs=[summary_md, network_view]
    )
    labels_cb.change(
        update_view, inputs=[group_dd, labels_cb], outputs=[summary_md, network_view]
    )
    app.load(
        update_view, inputs=[group_dd, labels_cb], outputs=[summary_md, network_view]
    )

if __name__ == "__main__":
    app.launch()
