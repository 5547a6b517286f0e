from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pytest

from artasia_atlas.config import AppConfig, DatasetConfig
from artasia_atlas.container import Container
from artasia_atlas.domain.errors import DatasetError, RenderingError
from artasia_atlas.ports.dataset import SiteDatasetPort
from artasia_atlas.services import AtlasService


@dataclass
class InMemoryDataset:
    rows: List[dict]

    def load(self):
        return list(self.rows)


class MissingDataset:
    def load(self):
        raise DatasetError("Failed to load sites", file_path="missing.csv")


@dataclass
class RecordingRenderer:
    calls: List[tuple] = field(default_factory=list)

    def render_html(self, state):
        return "<html></html>"

    def render(self, state, output_path: Path) -> Path:
        self.calls.append((state, output_path))
        return output_path


class TestAtlasService:
    def test_load_graph(self, sample_rows):
        service = AtlasService(dataset=InMemoryDataset(sample_rows))

        graph = service.load_graph()

        assert len(graph.nodes) == len(sample_rows)
        assert list(graph.groups) == ["Harbour Arts", "Library", "Unknown"]
        assert graph.representatives == {"Harbour Arts": 1, "Library": 3, "Unknown": 6}

    def test_absent_dataset_gives_empty_graph(self):
        service = AtlasService(dataset=MissingDataset())

        graph = service.load_graph()

        assert graph.is_empty
        assert graph.edges == ()

    def test_absent_dataset_strict_raises(self):
        service = AtlasService(dataset=MissingDataset())

        with pytest.raises(DatasetError) as excinfo:
            service.load_graph(strict=True)
        assert excinfo.value.file_path == "missing.csv"

    def test_initial_state(self, sample_rows):
        service = AtlasService(dataset=InMemoryDataset(sample_rows))

        state = service.initial_state(group_by="EarlyON", show_edge_labels=True)

        assert state.group_by == "EarlyON"
        assert state.show_edge_labels
        assert state.graph.nodes[0].group == "EarlyON"

    def test_render_delegates_to_renderer(self, sample_rows, tmp_path):
        renderer = RecordingRenderer()
        service = AtlasService(dataset=InMemoryDataset(sample_rows), renderer=renderer)
        state = service.initial_state()

        path = service.render(state, tmp_path / "atlas.html")

        assert path == tmp_path / "atlas.html"
        assert renderer.calls == [(state, tmp_path / "atlas.html")]

    def test_render_without_renderer_raises(self, sample_rows, tmp_path):
        service = AtlasService(dataset=InMemoryDataset(sample_rows))

        with pytest.raises(RenderingError):
            service.render(service.initial_state(), tmp_path / "atlas.html")


class TestContainer:
    def test_default_bindings_read_csv(self, tmp_path):
        csv_path = tmp_path / "sites.csv"
        csv_path.write_text(
            "Site,Partner Org,Participation,GPS\n"
            'A,P,1,"43.0, -79.0"\n'
            'B,P,2,"43.1, -79.1"\n',
            encoding="utf-8",
        )
        config = AppConfig(dataset=DatasetConfig(data_dir=tmp_path))

        container = Container.create_default(config=config)
        service = container.resolve(AtlasService)

        graph = service.load_graph(strict=True)
        assert [n.label for n in graph.nodes] == ["A", "B"]
        assert graph.representatives == {"P": 2}
        assert container.resolve(AtlasService) is service

    def test_register_override(self, sample_rows):
        container = Container.create_default()
        container.register(SiteDatasetPort, lambda: InMemoryDataset(sample_rows))

        service = container.resolve(AtlasService)

        assert len(service.load_graph().nodes) == len(sample_rows)

    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            Container().resolve(AtlasService)

    def test_non_singleton_factories(self):
        container = Container()
        container.register(list, list, singleton=False)

        assert container.resolve(list) is not container.resolve(list)
