# domain/network.py
"""Built-in road network for Hubli: hospitals (H*), emergency sites (E*), junctions (I*)."""

from collections.abc import Iterable

from dispatch_sim.domain.entities.geography import EdgeRecord, NodeRecord
from dispatch_sim.domain.graph import DuplicatePolicy, WeightedGraph

HUBLI_NODES: tuple[NodeRecord, ...] = tuple(
    NodeRecord(*row)
    for row in (
        ("H0", 15.3780, 75.1350, "KIMS Hospital"),
        ("H1", 15.3550, 75.1180, "SDM Hospital"),
        ("H2", 15.3450, 75.1100, "District Hospital"),
        ("H3", 15.3820, 75.1280, "Narayana Hrudayalaya"),
        ("H4", 15.3650, 75.1400, "Apollo BGS Hospital"),
        ("H5", 15.3520, 75.1430, "KLE Hospital"),
        ("H6", 15.3490, 75.1250, "Civil Hospital"),
        ("H7", 15.3730, 75.1330, "KIMS Govt Medical College"),
        ("H8", 15.3600, 75.1300, "Sushruta Hospital"),
        ("H9", 15.3700, 75.1100, "Akshay Hospital"),
        ("H10", 15.3580, 75.1380, "Sai Hospital"),
        ("H11", 15.3620, 75.1220, "Niramay Hospital"),
        ("E0", 15.3850, 75.1280, "Unkal Lake Area"),
        ("E1", 15.3720, 75.1420, "Vidyanagar Circle"),
        ("E2", 15.3580, 75.1250, "Old Hubli Market"),
        ("E3", 15.3500, 75.1350, "Gokul Road"),
        ("E4", 15.3650, 75.1050, "Hosur Cross"),
        ("E5", 15.3440, 75.1340, "Hubli Railway Station"),
        ("E6", 15.3620, 75.1380, "BRTS Bus Stand"),
        ("E7", 15.3900, 75.1150, "Keshwapur"),
        ("E8", 15.3750, 75.1050, "Navanagar"),
        ("E9", 15.3480, 75.1450, "KLE College Area"),
        ("E10", 15.3820, 75.1500, "BVB College Area"),
        ("E11", 15.3680, 75.1280, "Deshpande Nagar"),
        ("E12", 15.3520, 75.1090, "Lingarajapuram"),
        ("E13", 15.3590, 75.1470, "Tolankere"),
        ("E14", 15.3770, 75.1190, "Vidyagiri"),
        ("E15", 15.3920, 75.1200, "Adarsh Nagar"),
        ("E16", 15.3950, 75.1280, "Gabbur"),
        ("E17", 15.3400, 75.1480, "Amargol"),
        ("E18", 15.3640, 75.1530, "Shirur Park"),
        ("E19", 15.3780, 75.0980, "Tarihal"),
        ("E20", 15.3710, 75.1310, "Club House Circle"),
        ("E21", 15.3670, 75.1350, "Gandhi Nagar"),
        ("E22", 15.3880, 75.1320, "Kakati Nagar"),
        ("E23", 15.3420, 75.1200, "Rayapur"),
        ("E24", 15.3650, 75.1580, "Gadag Road"),
        ("E25", 15.3690, 75.1020, "Akshay Park"),
        ("E26", 15.3470, 75.1310, "KSRTC Bus Stand"),
        ("E27", 15.3620, 75.0850, "Hubli Airport"),
        ("E28", 15.3550, 75.1050, "Industrial Estate"),
        ("E29", 15.3510, 75.0950, "Kusugal"),
        ("E30", 15.3380, 75.1150, "Ranebennur Road"),
        ("I0", 15.3700, 75.1200, "Junction 1"),
        ("I1", 15.3600, 75.1150, "Junction 2"),
        ("I2", 15.3650, 75.1300, "Junction 3"),
        ("I3", 15.3550, 75.1250, "Junction 4"),
        ("I4", 15.3500, 75.1200, "Junction 5"),
        ("I5", 15.3600, 75.1350, "Junction 6"),
        ("I6", 15.3750, 75.1350, "Junction 7"),
        ("I7", 15.3800, 75.1200, "Junction 8"),
        ("I8", 15.3550, 75.1350, "Junction 9"),
        ("I9", 15.3650, 75.1450, "Junction 10"),
    )
)

# base weights are road distances in km
HUBLI_EDGES: tuple[EdgeRecord, ...] = tuple(
    EdgeRecord(*row)
    for row in (
        ("E0", "H0", 1.2),
        ("E0", "I0", 1.8),
        ("E0", "I7", 1.0),
        ("E1", "I5", 1.0),
        ("E1", "H0", 2.0),
        ("E1", "I6", 0.8),
        ("E2", "I2", 0.8),
        ("E2", "I3", 1.5),
        ("E2", "H8", 0.5),
        ("E3", "I3", 1.2),
        ("E3", "H1", 1.8),
        ("E3", "I8", 0.9),
        ("E4", "I1", 1.5),
        ("E4", "H2", 2.2),
        ("E4", "H9", 1.0),
        ("E5", "H1", 0.9),
        ("E5", "I3", 0.6),
        ("E5", "H6", 0.7),
        ("E6", "I5", 0.7),
        ("E6", "I2", 0.9),
        ("E6", "H10", 0.4),
        ("E7", "I0", 1.1),
        ("E7", "H0", 1.4),
        ("E7", "I7", 1.0),
        ("E8", "I1", 1.0),
        ("E8", "I0", 1.3),
        ("E8", "H9", 0.6),
        ("E9", "H1", 1.2),
        ("E9", "I3", 1.0),
        ("E9", "H5", 0.5),
        ("E10", "I5", 0.8),
        ("E10", "H0", 1.1),
        ("E10", "I9", 0.6),
        ("E11", "I2", 0.5),
        ("E11", "I0", 0.7),
        ("E11", "H11", 0.6),
        ("E12", "I4", 0.8),
        ("E12", "H2", 1.0),
        ("E12", "H6", 0.5),
        ("E13", "I5", 0.9),
        ("E13", "H0", 1.6),
        ("E13", "I9", 0.7),
        ("E14", "I0", 0.6),
        ("E14", "H0", 1.0),
        ("E14", "I7", 0.5),
        ("E15", "I7", 0.8),
        ("E15", "H0", 1.2),
        ("E15", "H3", 1.0),
        ("E16", "I7", 1.0),
        ("E16", "H3", 0.9),
        ("E16", "E0", 1.1),
        ("E17", "H5", 0.7),
        ("E17", "I8", 1.2),
        ("E17", "H1", 1.5),
        ("E18", "I9", 0.6),
        ("E18", "H4", 0.8),
        ("E18", "E13", 0.9),
        ("E19", "H9", 0.8),
        ("E19", "I1", 1.4),
        ("E19", "E27", 1.3),
        ("E20", "I6", 0.5),
        ("E20", "H7", 0.6),
        ("E20", "I2", 0.7),
        ("E21", "I5", 0.6),
        ("E21", "H4", 0.8),
        ("E21", "I6", 0.5),
        ("E22", "H3", 0.7),
        ("E22", "I7", 0.9),
        ("E22", "H7", 0.8),
        ("E23", "H2", 0.8),
        ("E23", "I4", 0.9),
        ("E23", "H6", 0.7),
        ("E24", "I9", 0.8),
        ("E24", "H4", 1.0),
        ("E24", "E13", 1.1),
        ("E25", "H9", 0.5),
        ("E25", "I1", 1.2),
        ("E25", "E8", 0.7),
        ("E26", "H6", 0.5),
        ("E26", "I3", 0.7),
        ("E26", "E5", 0.4),
        ("E27", "H9", 1.8),
        ("E27", "I1", 2.0),
        ("E27", "E29", 1.0),
        ("E28", "H2", 1.3),
        ("E28", "I1", 0.9),
        ("E28", "E29", 0.6),
        ("E29", "H2", 1.1),
        ("E29", "I4", 1.0),
        ("E29", "E30", 0.8),
        ("E30", "H2", 0.9),
        ("E30", "I4", 0.7),
        ("E30", "H6", 0.8),
        ("H0", "I0", 1.5),
        ("H0", "I2", 1.3),
        ("H0", "I6", 0.8),
        ("H0", "I7", 0.9),
        ("H1", "I3", 1.0),
        ("H1", "I1", 0.9),
        ("H1", "I8", 1.1),
        ("H2", "I4", 0.7),
        ("H2", "I1", 1.1),
        ("H3", "I7", 0.6),
        ("H3", "I6", 0.9),
        ("H4", "I5", 0.8),
        ("H4", "I9", 0.7),
        ("H4", "I6", 0.6),
        ("H5", "I8", 0.8),
        ("H5", "I9", 1.0),
        ("H6", "I3", 0.6),
        ("H6", "I4", 0.5),
        ("H7", "I6", 0.5),
        ("H7", "I2", 0.8),
        ("H8", "I2", 0.7),
        ("H8", "I3", 0.6),
        ("H9", "I1", 0.8),
        ("H9", "I0", 1.0),
        ("H10", "I5", 0.5),
        ("H10", "I9", 0.9),
        ("H11", "I2", 0.6),
        ("H11", "I0", 0.7),
        ("I0", "I1", 1.2),
        ("I0", "I2", 0.9),
        ("I0", "I7", 0.8),
        ("I1", "I4", 0.8),
        ("I2", "I3", 1.0),
        ("I2", "I5", 1.1),
        ("I2", "I6", 0.7),
        ("I3", "I4", 0.7),
        ("I3", "I8", 0.6),
        ("I4", "H1", 1.0),
        ("I5", "H0", 1.4),
        ("I5", "I6", 0.8),
        ("I5", "I9", 0.9),
        ("I6", "I7", 0.7),
        ("I7", "I0", 0.8),
        ("I8", "I5", 1.0),
        ("I9", "I6", 0.8),
    )
)

HOSPITAL_IDS = tuple(n.id for n in HUBLI_NODES if n.id.startswith("H"))
EMERGENCY_SITE_IDS = tuple(n.id for n in HUBLI_NODES if n.id.startswith("E"))

BUILTIN_NETWORKS: dict[str, tuple[tuple[NodeRecord, ...], tuple[EdgeRecord, ...]]] = {
    "hubli": (HUBLI_NODES, HUBLI_EDGES),
}


def build_graph(
    nodes: Iterable[NodeRecord | tuple] = HUBLI_NODES,
    edges: Iterable[EdgeRecord | tuple] = HUBLI_EDGES,
    *,
    duplicate_policy: DuplicatePolicy = "overwrite",
) -> WeightedGraph:
    """Materialise node and edge records; each edge record becomes two half-edges."""
    g = WeightedGraph(duplicate_policy=duplicate_policy)
    for rec in nodes:
        rec = rec if isinstance(rec, NodeRecord) else NodeRecord(*rec)
        g.add_node(rec.id, rec.lat, rec.lng, rec.name)
    for rec in edges:
        rec = rec if isinstance(rec, EdgeRecord) else EdgeRecord(*rec)
        g.add_edge(rec.a, rec.b, rec.base_weight)
    return g


def build_builtin_graph(name: str = "hubli", *, duplicate_policy: DuplicatePolicy = "overwrite"):
    try:
        nodes, edges = BUILTIN_NETWORKS[name]
    except KeyError:
        raise ValueError(f"Unknown built-in network {name!r}") from None
    return build_graph(nodes, edges, duplicate_policy=duplicate_policy)
