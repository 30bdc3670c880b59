from __future__ import annotations

import random

from django.core.management.base import BaseCommand

from modules.orders.constants import OrderStatus
from modules.orders.dtos import SaveOrderDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.shops.dtos import CreateShopDTO
from modules.shops.models import Shop
from modules.shops.repositories.django_repository import ShopDjangoRepository
from modules.shops.services import ShopService

SEED_SHOPS = ["Sharma General Store", "Gupta Kirana", "New Anand Traders"]

SEED_PRODUCTS = [
    # name, mrp, price
    ("Basmati Rice 5kg", 650.0, 599.0),
    ("Toor Dal 1kg", 180.0, 165.0),
    ("Sunflower Oil 1L", 210.0, None),
    ("Tea Leaves 500g", 290.0, 275.0),
    ("Sugar 1kg", 55.0, 48.0),
]


class Command(BaseCommand):
    help = "Seed database with shops, products and a few orders for development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=10,
            help="Number of orders to create.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        shops = self._seed_shops()
        products = self._seed_products()
        orders_created = self._seed_orders(shops, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"shops={len(shops)}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_shops(self) -> list[Shop]:
        self.stdout.write("Creating shops...")
        service = ShopService(repository=ShopDjangoRepository())
        shops: list[Shop] = []
        for name in SEED_SHOPS:
            shop = Shop.objects.filter(name=name).first()
            if shop is None:
                shop = service.create_shop(CreateShopDTO(name=name))
            shops.append(shop)
        return shops

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        service = ProductService(repository=ProductDjangoRepository())
        products: list[Product] = []
        for name, mrp, price in SEED_PRODUCTS:
            product = Product.objects.filter(name=name).first()
            if product is None:
                product = service.create_product(
                    CreateProductDTO(name=name, mrp=mrp, price=price)
                )
            products.append(product)
        return products

    def _seed_orders(
        self, shops: list[Shop], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        service = OrderService(order_repository=OrderDjangoRepository())
        statuses = list(OrderStatus.values)

        for _ in range(count):
            shop = random.choice(shops)
            picked = random.sample(products, k=random.randint(1, len(products)))
            items = [
                {
                    "productId": str(product.id),
                    "productName": product.name,
                    "mrp": product.mrp,
                    "price": _selling_price(product),
                    "qty": random.randint(1, 12),
                }
                for product in picked
            ]
            order = service.create_order(
                SaveOrderDTO(shop_id=shop.id, shop_name=shop.name, items=items)
            )
            target = random.choice(statuses)
            if target != order.status:
                service.update_status(str(order.id), target)
        return count


def _selling_price(product: Product) -> float:
    return product.price if product.price is not None else product.mrp
