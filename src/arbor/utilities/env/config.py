from arbor.utilities.env.growth import GrowthConfiguration
from arbor.utilities.env.turtle import TurtleConfiguration


class Configuration(
    GrowthConfiguration,
    TurtleConfiguration,
):
    """Aggregate environment configuration helpers."""
