"""UI theme constants — night-time lofi palette."""

# Base palette
BG = '#0f1026'
FG = '#e6e1ff'
ACCENT = '#ff9ecd'
ACCENT_HOVER = '#ffc2e0'
CARD = '#1c1b3a'
CARD_BORDER = '#2e2b5c'
SUBTLE = '#6d6a9c'
TRACK_BG = '#2e2b5c'  # progress bar trough

# Scene
SKY_TOP = '#141338'
SKY_BOTTOM = '#3b2a5e'
MOON = '#fff4c7'
STAR = '#fffbe6'
STAR_DIM = '#8f8bb8'
RAIN = '#9fb4ff'
PARTICLE = '#ffd9a8'
STEAM = '#dcdcf0'
SKYLINE = '#0b0a1f'
WINDOW_LIT = '#ffcf6b'
FRAME = '#3a2418'
DESK = '#5a3a28'
DESK_EDGE = '#442a1c'
CUP = '#e8e2d0'
COFFEE = '#4a2c1c'
VINYL = '#111111'
VINYL_GROOVE = '#2a2a2a'
VINYL_LABEL = ACCENT
VISUALIZER_BAR = '#8be9fd'

# Typography
FONT_FAMILY = 'Courier New'
TITLE_FONT = (FONT_FAMILY, 12, 'bold')
LABEL_FONT = (FONT_FAMILY, 10)
SMALL_FONT = (FONT_FAMILY, 8)
CLOCK_FONT = (FONT_FAMILY, 14, 'bold')

# Spacing (use PAD for section gaps, SMALL_PAD for related elements)
PAD = 8
SMALL_PAD = 4
BTN_PAD = (6, 2)

# Scene geometry (pixels)
SCENE_WIDTH = 640
SCENE_HEIGHT = 400
PIXEL = 4  # one "art pixel"
PROGRESS_WIDTH = 240
PROGRESS_HEIGHT = 6
VISUALIZER_BARS = 8

# Player glyphs
ICON_PLAY = '▶'
ICON_PAUSE = '❚❚'
ICON_PREV = '⏮'
ICON_NEXT = '⏭'
