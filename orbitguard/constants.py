"""Game-wide constants: screen geometry, counts, tuning values, colours and asset paths."""

from enum import IntEnum

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
WINDOW_TITLE = "Orbit Guard"

NUM_SHIP_TEXTURES_1 = 6
NUM_SHIP_TEXTURES_2 = 6

NUM_ENEMY_TEXTURES = 1
NUM_ENEMY_ON_MAP = 24
NUM_UI_TEXTURES = 6
NUM_ORBIT_TEXTURES = 2
NUM_HEALTH_MODULE_TEXTURES = 2
NUM_OBJ_HEALTH_ON_MAP = 2
NUM_BACKGROUNDS = 3
NUM_LEVEL_IMAGES = 2
NUM_FONTS = 3
FONT_SIZES = (16, 21, 24)
COORDS_SYNC = 90
SPAWN_ENEMY_X = -400
DEGREES_IN_CIRCLE = 360
DEGREES_IN_HALF_CIRCLE = 180
SHIP_HITBOX = 128
PLANET_HITBOX = 240
HEALTH_HITBOX = 64
SHIFT_HEART_PLANET_Y = 185
SHIFT_HEART_SHIP_Y = 30
MOVE_ANGULAR = 15.0
MOVE_LEN = 30
SCREEN_FPS = 60
SCREEN_TICK_PER_FRAME = 1000 // SCREEN_FPS


class GameState(IntEnum):
    """Screens and outcomes the main loop moves between."""

    MENU = 0
    PLAY_MENU = 1
    LVL1 = 2
    LVL2 = 3
    LVL1_LOSE = 4
    LVL2_LOSE = 5
    HELP = 6
    WIN = 7
    LOSE = 8
    QUIT = 9
    RETRY = 10


# Difficulty tuning.
RAND_SPAWN = 1200
RAND_SPAWN_FIRST = 1200
KILLS_TO_WIN = 200

COLOR_MAIN_PASS = (0, 192, 248, 0xFF)
COLOR_SHADOW_PASS = (7, 63, 147, 0xFF)
COLOR_MAIN_ACT = (163, 234, 255, 0xFF)
COLOR_SHADOW_ACT = (0, 75, 187, 0xFF)

ENEMY_SPEED_LEVELS = 100
ENEMY_FRAMERATE_LEVELS = 1

FILE_PATHS_SHIP_1 = (
    "res/pics/ship1Big.png",
    "res/pics/ship1moveBig.png",
    "res/pics/ship_shoot1Big.png",
    "res/pics/ship_back1Big.png",
    "res/pics/ship_reloadBig.png",
    "res/pics/triple_shoot_test.png",
)

FILE_PATHS_SHIP_2 = ("res/pics/eva_ship_main.png",) * NUM_SHIP_TEXTURES_2

FILE_PATHS_ENEMY = ("res/pics/meteor1Big.png",)

FILE_PATHS_UI = (
    "res/pics/heartBig.png",
    "res/pics/heartBlackBig.png",
    "res/pics/ui_shootBig.png",
    "res/pics/ui_shootBlackBig.png",
    "res/pics/orbitElement.png",
    "res/pics/ui_shootBlue.png",
)

FILE_PATHS_ORBIT = ("res/pics/orbitDefault.png", "res/pics/orbitMove.png")

FILE_PATH_HEALTH_MODULE = (
    "res/pics/healthModule.png",
    "res/pics/healthModuleBack.png",
)

FILE_PATH_BACKGROUND = (
    "res/pics/planet1Big.png",
    "res/pics/menuBack.png",
    "res/pics/eva_space.png",
)

FILE_PATH_MINE = "res/pics/mine.png"

FILE_PATH_FONT = "res/starship_font.ttf"

FILE_PATHS_LEVEL_IMAGES = ("res/pics/lvl1.png", "res/pics/lvl2.png")

HELP_TEXT = (
    "USE W, A, S, D TO MOVE YOUR SHIP,\n\n"
    "USE SPACE TO SHOOT,\n\n"
    "USE E TO TURN 180 DEGREES.\n\n"
    "SOMETIMES YOU CAN TAKE AN ORBITAL PROBE,\n\n"
    "PRESS M TO ACCELERATE ORBITAL PROBE.\n\n"
    "PRESS ESC TO OPEN MENU."
)