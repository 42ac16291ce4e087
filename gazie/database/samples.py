"""Rows written into empty tables on first launch."""

from gazie.models.schemas import CustomerInput, ProductInput

SAMPLE_CUSTOMERS = (
    CustomerInput(code="CLI001", name="ABC SRL", city="Roma", phone="06-123456", email="info@abc.it"),
    CustomerInput(code="CLI002", name="XYZ SPA", city="Milano", phone="02-789012", email="contatti@xyz.it"),
    CustomerInput(code="CLI003", name="DEF SRL", city="Napoli", phone="081-345678", email="office@def.it"),
)

SAMPLE_PRODUCTS = (
    ProductInput(code="PROD001", name="Prodotto Base", price=25.50, description="Prodotto di esempio"),
    ProductInput(code="ART002", name="Articolo Standard", price=15.25, description="Altro articolo di qualità"),
    ProductInput(code="MERC003", name="Merce Premium", price=99.99, description="Merce di lusso"),
)

# Sample products start with some stock so the list screen has non-zero values.
SAMPLE_STOCK = 10
SAMPLE_MIN_STOCK = 2
