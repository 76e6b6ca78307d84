import pytest

from binservice.errors import NotFound, StoreUnavailable
from binservice.models.domain import CenterNode, CenterRecord, Truck
from binservice.services.reference import ReferenceService


@pytest.fixture
def service(relational, graph) -> ReferenceService:
    return ReferenceService(relational, graph)


def test_centers_are_enriched_from_graph(service, relational, graph) -> None:
    relational.centers[1] = CenterRecord(center_id=1, type_name="Reciclaje", correlation_key="Warnes 100|CHACARITA")
    graph.centers["Warnes 100|CHACARITA"] = CenterNode(
        name="Punto Verde", neighborhood="CHACARITA", address="Warnes 100", latitude=-34.59, longitude=-58.45
    )

    (center,) = service.list_centers()

    assert center.type_name == "Reciclaje"
    assert center.name == "Punto Verde"
    assert center.latitude == -34.59


def test_center_without_key_skips_graph(service, relational, graph) -> None:
    relational.centers[2] = CenterRecord(center_id=2, type_name=None, correlation_key=None)

    center = service.get_center(2)

    assert center.name == ""
    assert graph.calls == 0


def test_center_graph_failure_keeps_defaults(service, relational, graph) -> None:
    relational.centers[3] = CenterRecord(center_id=3, type_name="Compost", correlation_key="x|BOEDO")
    graph.fail_with = StoreUnavailable("graph", "get center", "down")

    center = service.get_center(3)

    assert center.type_name == "Compost"
    assert (center.latitude, center.longitude) == (0.0, 0.0)


def test_missing_center(service) -> None:
    with pytest.raises(NotFound):
        service.get_center(9)


def test_trucks(service, relational) -> None:
    relational.trucks[7] = Truck(truck_id=7, type_id=2, type_name="Compactador", status_id=1, status_name="Operativo")

    assert [truck.truck_id for truck in service.list_trucks()] == [7]
    assert service.get_truck(7).status_name == "Operativo"
    with pytest.raises(NotFound):
        service.get_truck(8)
