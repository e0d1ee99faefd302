# storefront/sample_data.py
from typing import List

from .models import Product

SAMPLE_PRODUCTS: List[Product] = [
    Product(
        id="sample-1",
        name="Classic Cotton Crew Tee",
        price="499",
        brand="Roadster",
        category="Men",
        description="Everyday crew-neck tee in soft combed cotton.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("S", "M", "L", "XL"),
        colors=("White", "Black", "Navy"),
        rating=4.3,
        reviews=1284,
        discount=20,
        in_stock=True,
    ),
    Product(
        id="sample-2",
        name="Slim Fit Stretch Jeans",
        price="1799",
        brand="Levis",
        category="Men",
        description="Mid-rise slim jeans with a touch of stretch.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("30", "32", "34", "36"),
        colors=("Indigo", "Black"),
        rating=4.5,
        reviews=865,
        discount=15,
        in_stock=True,
    ),
    Product(
        id="sample-3",
        name="Floral Print Maxi Dress",
        price="2199",
        brand="Vero Moda",
        category="Women",
        description="Flowing maxi dress with an all-over floral print.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("XS", "S", "M", "L"),
        colors=("Blue", "Pink"),
        rating=4.6,
        reviews=432,
        discount=30,
        in_stock=True,
    ),
    Product(
        id="sample-4",
        name="Cropped Denim Jacket",
        price="2499",
        brand="Only",
        category="Women",
        description="Light-wash cropped jacket with button front.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("S", "M", "L"),
        colors=("Light Blue",),
        rating=4.2,
        reviews=219,
        in_stock=True,
    ),
    Product(
        id="sample-5",
        name="Running Sneakers",
        price="3299",
        brand="Puma",
        category="Footwear",
        description="Lightweight running shoes with cushioned sole.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("7", "8", "9", "10"),
        colors=("Grey", "Black"),
        rating=4.4,
        reviews=1532,
        discount=40,
        in_stock=True,
    ),
    Product(
        id="sample-6",
        name="Leather Chelsea Boots",
        price="4599",
        brand="Red Tape",
        category="Footwear",
        description="Genuine leather boots with elastic side panels.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("7", "8", "9", "10", "11"),
        colors=("Brown", "Black"),
        rating=4.1,
        reviews=348,
        in_stock=False,
    ),
    Product(
        id="sample-7",
        name="Kids Graphic Hoodie",
        price="999",
        brand="H&M",
        category="Kids",
        description="Fleece-lined hoodie with a playful graphic print.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("4-5Y", "6-7Y", "8-9Y"),
        colors=("Yellow", "Green"),
        rating=4.7,
        reviews=96,
        discount=10,
        in_stock=True,
    ),
    Product(
        id="sample-8",
        name="Canvas Tote Bag",
        price="799",
        brand="Roadster",
        category="Accessories",
        description="Sturdy canvas tote with an inner zip pocket.",
        image="/placeholder.svg?height=400&width=300",
        colors=("Beige", "Olive"),
        rating=4.0,
        reviews=154,
        in_stock=True,
    ),
    Product(
        id="sample-9",
        name="Analog Steel Watch",
        price="5999",
        brand="Fossil",
        category="Accessories",
        description="Stainless steel analog watch with date window.",
        image="/placeholder.svg?height=400&width=300",
        rating=4.8,
        reviews=512,
        discount=25,
        in_stock=True,
    ),
    Product(
        id="sample-10",
        name="Linen Blend Shirt",
        price="1299",
        brand="Levis",
        category="Men",
        description="Breathable linen blend shirt for warm days.",
        image="/placeholder.svg?height=400&width=300",
        sizes=("M", "L", "XL"),
        colors=("White", "Sky Blue"),
        rating=4.2,
        reviews=301,
        in_stock=True,
    ),
]
