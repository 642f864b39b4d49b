from .euler_tour import EulerTour, TourEntry, build_euler_tour
from .lca import Lca
