"""Category entity for grouping articles."""

from guide.domain.model.common import DomainModel
from guide.domain.value import CategoryId, CategoryName


class Category(DomainModel):
    """Category entity.

    Categories are provisioned outside the core and referenced by articles.
    """

    id: CategoryId
    name: CategoryName
