# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à init_db() et avant le chargement des routers.

from placementhub.models.user import User  # noqa: F401
from placementhub.models.student import Student  # noqa: F401
from placementhub.models.internship import Internship  # noqa: F401
from placementhub.models.company import Company  # noqa: F401
