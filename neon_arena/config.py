"""Tunables for Neon Arena.

Everything here is a plain module-level constant so gameplay code can do
``from neon_arena import config`` and read values directly. Edit here to
rebalance; nothing else hard-codes these numbers.
"""

import math

import pygame

# ---------------------------- Surface & timing ----------------------------- #
WIDTH, HEIGHT = 800, 600
FPS = 60
FRAME_MS = 16.67  # fixed step handed to the simulation, not measured
TITLE = "Neon Arena"

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
MAGENTA = (255, 0, 255)
GREY = (102, 102, 102)
SHOP_GREEN = (76, 175, 80)

# ------------------------------- Player ------------------------------------ #
PLAYER_SIZE = 40
PLAYER_START = (WIDTH / 2, HEIGHT / 2)
PLAYER_BASE_SPEED = 3.0
PLAYER_MAX_HEALTH = 100
CONTACT_DAMAGE = 1  # per frame of overlap

# ------------------------------- Enemies ----------------------------------- #
ENEMY_SIZE = 40
ENEMY_HEALTH = 50
ENEMY_SPEED = 1.0
ENEMY_COLOR = RED
WAVE_BASE_ENEMIES = 2  # a wave holds WAVE_BASE_ENEMIES + level enemies
KILL_SCORE = 100
KILL_MONEY = 10

# ------------------------------- Bullets ----------------------------------- #
BULLET_RADIUS = 3
BULLET_SPEED = 10.0
SPREAD_ARC = math.pi / 12  # total fan, 15 degrees

# ------------------------------- Weapons ----------------------------------- #
# name -> (display name, damage, fire rate in seconds between shots)
WEAPON_STATS = {
    "pistol": ("Pistol", 100, 0.5),
    "assaultRifle": ("Assault Rifle", 100, 0.1),
    "shotgun": ("Shotgun", 100, 1.0),
    "laser": ("Laser", 100, 0.2),
    "rocket": ("Rocket", 150, 1.5),
}
BASE_WEAPONS = ("pistol", "assaultRifle", "shotgun")
EXTRA_WEAPONS = ("laser", "rocket")
ENFORCE_FIRE_RATE = False

# ------------------------------ Pickups ------------------------------------ #
PICKUP_SIZE = 30
POWERUP_SPAWN_INTERVAL = 10000.0  # ms
UPGRADE_SPAWN_INTERVAL = 15000.0  # ms
UPGRADE_SPHERES_ENABLED = True

HEALTH_PACK = 50
SPEED_BOOST_MULT = 1.5
SPEED_BOOST_MS = 5000.0
INVINCIBILITY_MS = 5000.0
INFINITE_AMMO_MS = 10000.0

POWERUP_COLORS = {
    "health": RED,
    "ammo": YELLOW,
    "speedBoost": GREEN,
    "invincibility": CYAN,
    "infiniteAmmo": MAGENTA,
}
SPHERE_COLORS = {
    "laser": CYAN,
    "rocket": MAGENTA,
}

# ------------------------------- Economy ----------------------------------- #
# tier id -> (display name, starting cost)
UPGRADE_TIERS = {
    "playerSpeed": ("Player Speed", 100),
    "playerHealth": ("Player Health", 100),
    "weaponFireRate": ("Weapon Fire Rate", 150),
    "multiShot": ("Multi Shot", 200),
}
COST_GROWTH = 1.5
SPEED_UPGRADE = 0.5
HEALTH_UPGRADE = 20
FIRE_RATE_UPGRADE = 0.8

# Shop panel layout, shared by the renderer and click handling
SHOP_WIDTH, SHOP_HEIGHT = 300, 250
SHOP_X = WIDTH - SHOP_WIDTH
SHOP_BUTTON_X = WIDTH - 280
SHOP_BUTTON_W, SHOP_BUTTON_H = 260, 35
SHOP_BUTTON_TOP = 60
SHOP_BUTTON_STEP = 45

# ------------------------------- Bindings ---------------------------------- #
MOVE_KEYS = {
    pygame.K_w: (0, -1),
    pygame.K_s: (0, 1),
    pygame.K_a: (-1, 0),
    pygame.K_d: (1, 0),
}
WEAPON_KEYS = {
    pygame.K_1: "pistol",
    pygame.K_2: "assaultRifle",
    pygame.K_3: "shotgun",
}
SHOP_KEY = pygame.K_b
RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_ESCAPE

# -------------------------------- Audio ------------------------------------ #
SAMPLE_RATE = 44100
MASTER_VOLUME = 0.30
# sound -> (frequency Hz, duration s, amplitude)
SOUND_TONES = {
    "shoot": (880, 0.045, 0.40),
    "hit": (210, 0.06, 0.35),
    "powerup": (980, 0.12, 0.35),
    "game_over": (220, 0.30, 0.50),
}

# ------------------------------- Logging ----------------------------------- #
LOG_LEVEL_ENV = "NEON_ARENA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
