from arbor.turtle.boundary import GroundClamp  # noqa: F401
from arbor.turtle.events import (BranchEvent, EventKind,  # noqa: F401
                                 EventRecorder, GrowthCallback, GrowthEvent,
                                 LeafEvent, RootEvent, RotateEvent, TurnAxis)
from arbor.turtle.interpreter import (GrowthMode, PassResult,  # noqa: F401
                                      TurtleInterpreter, interpret)
from arbor.turtle.state import Pose, StateStack, TurtleState  # noqa: F401
