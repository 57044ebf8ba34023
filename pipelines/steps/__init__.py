

# Namespace for pipeline steps
from .discover_adopters import DiscoverAdopterFiles, ParseAdopterFiles  # noqa: F401
from .validate_adopters import ValidateAdopters  # noqa: F401
from .aggregate_adopters import AggregateAdopters, StampBuildDate  # noqa: F401
from .render_page import RenderAdoptersPage, WriteAdoptersData  # noqa: F401


