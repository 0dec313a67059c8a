QTY_MIN = 1
QTY_MAX = 10

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

EMPTY_CART_TEXT = "Your cart is empty"
FREE_SHIPPING_TEXT = "FREE"

SESSION_COOKIE = "cart_session"

# sample cart every new session starts from (no storage behind it)
SEED_CART = [
    {
        "id": "marmot-ajax-3",
        "name": "Marmot Ajax Tent - 3-Person, 3-Season",
        "color_variant": "Pale Pumpkin/Terracotta",
        "unit_price": "199.99",
        "quantity": 1,
        "image_ref": "images/tents/marmot-ajax-tent-3-person-3-season-in-pale-pumpkin-terracotta~p~880rr_01~320.jpg",
        "detail_link": "product_pages/marmot-ajax-3.html",
    },
    {
        "id": "north-face-talus-4",
        "name": "The North Face Talus Tent - 4-Person, 3-Season",
        "color_variant": "Golden Oak/Saffron Yellow",
        "unit_price": "299.99",
        "quantity": 2,
        "image_ref": "images/tents/the-north-face-talus-tent-4-person-3-season-in-golden-oak-saffron-yellow~p~985rf_01~320.jpg",
        "detail_link": "product_pages/north-face-talus-4.html",
    },
    {
        "id": "kelty-discovery-4",
        "name": "Kelty Discovery 4-Person Tent",
        "color_variant": "Orange/Gray",
        "unit_price": "159.99",
        "quantity": 1,
        "image_ref": "images/tents/kelty-discovery-4-person-tent~p~kelty001~320.jpg",
        "detail_link": "product_pages/kelty-discovery-4.html",
    },
]
