import pytest

from models import EdgeSpec, MansionLayout, RoomSpec, SuspectSpec


@pytest.fixture()
def small_layout():
    """Hall with a clue, Study (left, clue) and Kitchen (right, no clue)."""
    return MansionLayout(
        entrance="Hall",
        rooms=[
            RoomSpec(name="Hall", clue="clue1"),
            RoomSpec(name="Study", clue="clue2"),
            RoomSpec(name="Kitchen", clue=""),
        ],
        edges=[
            EdgeSpec(parent="Hall", direction="left", child="Study"),
            EdgeSpec(parent="Hall", direction="right", child="Kitchen"),
        ],
    )


@pytest.fixture()
def small_suspects():
    return [
        SuspectSpec(clue="clue1", suspect="Ana"),
        SuspectSpec(clue="clue2", suspect="Ana"),
    ]
