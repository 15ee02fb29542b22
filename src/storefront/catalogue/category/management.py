"""Category management: command, handler and listing."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=100)
    description: Text()


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo._dao.query.filter(slug=command.slug).all().items:
            raise ValidationError({"slug": [f"Category slug '{command.slug}' is already in use"]})

        category = Category(
            name=command.name,
            slug=command.slug,
            description=command.description,
        )
        repo.add(category)
        return str(category.id)


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category)._dao.query.order_by("name").all().items
