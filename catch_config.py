
CONFIG = {
    "SPAWN_MS": 2000,
    "GRACE_MS": 3000,
    "BASE_SPEED": 2.0,
    "SPEED_PER_POINT": 0.0,
    "BASKET_SPEED": 10,
    "BASKET_W": 150,
    "BASKET_H": 75,
    "BASKET_BOTTOM_OFFSET": 100,
    "SYMBOL_SIZE": 60,
    "SPAWN_SEED": None,
    "ASSET_DIR": "assets",
}
