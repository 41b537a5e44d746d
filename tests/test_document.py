"""Tests for the pedigree document model."""

import json

import pytest

from pedigree_sync.config import PedigreeConfig
from pedigree_sync.exceptions import MalformedDocument
from pedigree_sync.models.document import PedigreeDocument, PedigreeNode


def make_data() -> dict:
    return {
        "GG": [
            {"id": 0, "prop": {"gender": "M", "phenotipsId": "P001"}},
            {"id": 1, "prop": {"gender": "F"}},
            {"id": 2, "chhub": True},
        ],
        "ranks": [1, 2, 2],
        "probandNodeID": 0,
    }


class TestPedigreeDocument:
    """Tests for PedigreeDocument."""

    def test_nodes_in_document_order(self):
        """Test nodes come back in the order of the node list."""
        doc = PedigreeDocument(make_data())

        nodes = doc.nodes
        assert [n.index for n in nodes] == [0, 1, 2]
        assert [n.raw["id"] for n in nodes] == [0, 1, 2]

    def test_nodes_are_live_views(self):
        """Test node views reference the wrapped data, not copies."""
        data = make_data()
        doc = PedigreeDocument(data)

        doc.nodes[0].properties["gender"] = "F"
        assert data["GG"][0]["prop"]["gender"] == "F"

    def test_missing_node_list(self):
        """Test a document without a node list fails on traversal."""
        doc = PedigreeDocument({"ranks": []})
        assert not doc.has_node_list

        with pytest.raises(MalformedDocument, match="no node list"):
            doc.nodes

    def test_node_list_not_a_list(self):
        """Test a non-array node list is rejected."""
        doc = PedigreeDocument({"GG": {"0": {}}})

        with pytest.raises(MalformedDocument) as exc:
            doc.nodes
        assert exc.value.path == "GG"
        assert "(at GG)" in str(exc.value)

    def test_node_not_an_object(self):
        """Test non-object nodes are rejected with their position."""
        doc = PedigreeDocument({"GG": [{"id": 0}, "oops"]})

        with pytest.raises(MalformedDocument) as exc:
            doc.nodes
        assert exc.value.path == "GG[1]"

    def test_non_mapping_document(self):
        """Test wrapping something other than a JSON object."""
        with pytest.raises(MalformedDocument):
            PedigreeDocument(["GG"])

    def test_is_empty(self):
        assert PedigreeDocument({}).is_empty
        assert not PedigreeDocument(make_data()).is_empty

    def test_from_json(self):
        """Test parsing a document from JSON text."""
        doc = PedigreeDocument.from_json(json.dumps(make_data()))
        assert doc.data["probandNodeID"] == 0
        assert len(doc.nodes) == 3

    def test_from_json_invalid(self):
        """Test invalid JSON is reported as a malformed document."""
        with pytest.raises(MalformedDocument, match="not valid JSON"):
            PedigreeDocument.from_json("{GG: [")

    def test_from_json_not_an_object(self):
        with pytest.raises(MalformedDocument):
            PedigreeDocument.from_json("[1, 2, 3]")

    def test_to_json_keeps_unknown_keys(self):
        """Test layout keys the model does not interpret survive serialization."""
        doc = PedigreeDocument(make_data())
        restored = json.loads(doc.to_json())
        assert restored == make_data()

    def test_custom_keys(self):
        """Test key names come from configuration."""
        config = PedigreeConfig(nodes_key="nodes", properties_key="props", link_key="patient")
        doc = PedigreeDocument({"nodes": [{"props": {"patient": "X9"}}]}, config=config)

        assert doc.nodes[0].external_id == "X9"


class TestPedigreeNode:
    """Tests for PedigreeNode."""

    def test_properties_absent(self):
        node = PedigreeNode(index=0, raw={"id": 0})
        assert node.properties is None
        assert node.has_properties is False
        assert node.external_id is None

    def test_properties_null(self):
        """Test a JSON null property bag counts as absent."""
        node = PedigreeNode(index=0, raw={"prop": None})
        assert node.properties is None
        assert node.has_properties is False

    def test_empty_properties(self):
        node = PedigreeNode(index=0, raw={"prop": {}})
        assert node.properties == {}
        assert node.has_properties is False

    def test_properties_wrong_shape(self):
        """Test a non-object property bag is a malformed document."""
        node = PedigreeNode(index=4, raw={"prop": "P001"})

        with pytest.raises(MalformedDocument) as exc:
            node.properties
        assert exc.value.path == "GG[4].prop"

    def test_external_id(self):
        node = PedigreeNode(index=0, raw={"prop": {"phenotipsId": "P001"}})
        assert node.external_id == "P001"

    def test_external_id_null(self):
        node = PedigreeNode(index=0, raw={"prop": {"phenotipsId": None, "gender": "U"}})
        assert node.external_id is None

    def test_external_id_number(self):
        """Test non-string ids are read as strings."""
        node = PedigreeNode(index=0, raw={"prop": {"phenotipsId": 42}})
        assert node.external_id == "42"
