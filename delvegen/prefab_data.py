"""Hand-drawn levels, sections and vault rooms used by the prefab builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PrefabLevel:
    """A whole level drawn as text, one character per tile."""

    template: str
    width: int
    height: int


@dataclass(frozen=True)
class PrefabRoom:
    """A small vault that may be stamped onto open floor between two depths."""

    template: str
    width: int
    height: int
    first_depth: int
    last_depth: int


class HorizontalPlacement(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalPlacement(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class PrefabSection:
    """A fragment of a level placed at a fixed edge or centre of the map."""

    template: str
    width: int
    height: int
    placement: tuple[HorizontalPlacement, VerticalPlacement]


_LEVEL_MAP_ROWS = (
    "####################################################################################################",
    "####        ########################################################################################",
    "####   @    ########################################################################################",
    "####        ########################################################################################",
    "#### ###############################################################################################",
    "#### ###############################################################################################",
    "#### ######### #    # #######       #########  ####    #####                            ############",
    "#### ######### ###### #######   o   #########  #### ## #####                ########### ############",
    "#                        ####       #########   ### ##         o            ########### ############",
    "#### ######### ###       ####       #######         ## #####                ########### ############",
    "#### ######### ###       ####       ####### #   ### ## #####                ########### ############",
    "#### ######### ###       ####       ####### #######    #####     o          ########### ############",
    "##          ## ###       ####       ####### ################                ########### ############",
    "##          ## ###   o   ###### ########### #   ############                ########### ############",
    "##          ## ###       ###### ###########     ###                         ########### ############",
    "##    %                  ###### ########### #   ###   !   ##                ########### ############",
    "##          ## ###              ######   ## #######       ##                ###########b############",
    "##          ## ###       ## ### #####     # ########################      ############# ############",
    "##          ## ###       ## ### #####     # #   ######################    ############# ############",
    "### ## ####### ###### ##### ### ####          o ###########     ######    ############# ############",
    "### ## ####### ###### ####   ## ####        #   #########         ###### ############## ############",
    "######                  ####### ####            ######     !    !    ### #    ######### ############",
    "#####                     ##### ####        #   ######               ### ############## ############",
    "####             u              #####     # ##########               ### ############## ############",
    "####           !           ### ######     # ##########      o##o     ### #   ########## ############",
    "####                       ### #######   ## #   ######               ###   b ########## ############",
    "####   ######### ########## %  ######## ###################     ######## ##   #######       ########",
    "### ### ######## ##########    ######## #################### ##########   #   #######  q    ########",
    "## ##### ######   #########    ########          ########### #######   # b#   #######   q   ########",
    "## #####           ###############      ###      ########### #######   ####   #######    q  ########",
    "## ##### ####       ############## ######## b  b ########### ####         # ^ #######     q ########",
    "### ###^####         ############# ########      #####       ####      # b#   ######################",
    "####   ######       ###            ########      ##### b     ####   !  ####^^ ######################",
    "#!%^## ###  ##           ########## ########  bb                 b         # > #####################",
    "#!%^   ###  ###     ############### ########      ##### b     ####      # b#   #####################",
    "####################################################################################################",
)

WFC_POPULATED = PrefabLevel(
    template="\n".join(_LEVEL_MAP_ROWS) + "\n",
    width=100,
    height=48,
)

TRAP = PrefabRoom(
    template=" ^^^  ^!^  ^^^ ",
    width=5,
    height=5,
    first_depth=0,
    last_depth=100,
)

CHICKFILA = PrefabRoom(
    template="=q=",
    width=3,
    height=1,
    first_depth=0,
    last_depth=100,
)

CHECKERBOARD = PrefabRoom(
    template="\n......\n.o#o#.\n.#^#u.\n.!#.#.\n......\n",
    width=6,
    height=5,
    first_depth=0,
    last_depth=100,
)

WELL = PrefabRoom(
    template="\n.......\n.##.##.\n.#...#.\n.##.##.\n.......\n",
    width=7,
    height=5,
    first_depth=0,
    last_depth=100,
)

_RIGHT_FORT_ROWS = (
    "     #        /",
    "  #######     /",
    "  #     #     /",
    "  #     #######",
    "  #  g        #",
    "  #     #######",
    "  #     #     /",
    "  ### ###     /",
    "    # #       /",
    "    # #       /",
    "    # ##      /",
    "    ^         /",
    "    ^         /",
    "    # ##      /",
    "    # #       /",
    "    # #       /",
    "    # #       /",
    "    # #       /",
    "  ### ###     /",
    "  #     #     /",
    "  #     #     /",
    "  #  g  #     /",
    "  #     #     /",
    "  #     #     /",
    "  ### ###     /",
    "    #         /",
    "    # #       /",
    "    # #       /",
    "    # ##      /",
    "    ^         /",
    "    ^         /",
    "    # ##      /",
    "    # #       /",
    "    # #       /",
    "    # #       /",
    "  ### ###     /",
    "  #     #     /",
    "  #     #######",
    "  #  g        #",
    "  #     #######",
    "  #     #     /",
    "  #######     /",
    "     #        /",
)

UNDERGROUND_FORT = PrefabSection(
    template="\n" + "\n".join(_RIGHT_FORT_ROWS) + "\n",
    width=15,
    height=43,
    placement=(HorizontalPlacement.RIGHT, VerticalPlacement.TOP),
)

_NESTED_ROOMS_ROWS = (
    "#########   #########",
    "# b               b #",
    "#  ######   ######  #",
    "#  #             #  #",
    "#  #  ###   ###  #  #",
    "#  #  #       #  #  #",
    "#  #  #       #  #  #",
    "#  #  #       #  #  #",
    "#  #  ###   ###  #  #",
    "#  #    !   !    #  #",
    "#  ######   ######  #",
    "#b                 b#",
    "#########   #########",
)

NESTED_ROOMS = PrefabSection(
    template="".join(_NESTED_ROOMS_ROWS),
    width=21,
    height=13,
    placement=(HorizontalPlacement.CENTER, VerticalPlacement.CENTER),
)