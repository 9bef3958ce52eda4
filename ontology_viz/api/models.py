# ontology_viz/api/models.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ontology_viz.models.graph import Graph, GraphStatistics, NeighborRecord, Neighborhood


class NodeModel(BaseModel):
    id: str = Field(..., description="Raw identifier (URI, blank node id or literal text).")
    label: str = Field(..., description="Display label derived from the identifier.")


class EdgeModel(BaseModel):
    subject: str
    object: str
    predicate: str
    label: str = Field(..., description="Display label derived from the predicate.")


class GraphResponse(BaseModel):
    """
    Node/edge lists in the shape the force-directed frontend consumes.
    """
    nodes: List[NodeModel] = Field(default_factory=list)
    edges: List[EdgeModel] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: Graph) -> "GraphResponse":
        return cls(
            nodes=[NodeModel(id=n.id, label=n.label) for n in graph.nodes],
            edges=[
                EdgeModel(
                    subject=e.subject,
                    object=e.object,
                    predicate=e.predicate,
                    label=e.label,
                )
                for e in graph.edges
            ],
        )


class RelatedNodeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    node_id: str = Field(..., alias="nodeId")
    node_label: str = Field(..., alias="nodeLabel")
    relationship_type: str = Field(..., alias="relationshipType")

    @classmethod
    def from_record(cls, record: NeighborRecord) -> "RelatedNodeModel":
        return cls(
            node_id=record.node_id,
            node_label=record.node_label,
            relationship_type=record.relationship_type,
        )


class NodeDetailsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str
    incoming_connections: List[RelatedNodeModel] = Field(
        default_factory=list, alias="incomingConnections"
    )
    outgoing_connections: List[RelatedNodeModel] = Field(
        default_factory=list, alias="outgoingConnections"
    )

    @classmethod
    def from_neighborhood(cls, hood: Neighborhood) -> "NodeDetailsResponse":
        return cls(
            id=hood.id,
            label=hood.label,
            incoming_connections=[RelatedNodeModel.from_record(r) for r in hood.incoming],
            outgoing_connections=[RelatedNodeModel.from_record(r) for r in hood.outgoing],
        )


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    node_count: int = Field(..., alias="nodeCount")
    edge_count: int = Field(..., alias="edgeCount")
    triple_count: int = Field(..., alias="tripleCount")
    distinct_label_count: int = Field(
        ...,
        alias="distinctLabelCount",
        description="Distinct edge labels (not distinct predicate URIs).",
    )

    @classmethod
    def from_statistics(cls, stats: GraphStatistics) -> "StatisticsResponse":
        return cls(
            node_count=stats.node_count,
            edge_count=stats.edge_count,
            triple_count=stats.triple_count,
            distinct_label_count=stats.distinct_label_count,
        )


class ErrorResponse(BaseModel):
    detail: str
    error: str = Field(..., description="Machine-readable error code.")
