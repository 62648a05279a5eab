from models.occupant import Occupant
from models.room import Room, RoomShape
from models.seating import Cell, Placement, SeatingPlan
from models.hall import HallAssignment
from models.errors import ConfigurationError
