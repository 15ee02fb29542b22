"""Domain initialization and configuration.

Catalogue, cart, ordering and identity all register with this single domain
so that checkout can read products, write the order and clear the cart inside
one unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
