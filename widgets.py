from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from PIL import Image, ImageDraw, ImageTk

try:
    import customtkinter as ctk
except Exception:
    ctk = None

from config import Config
from ratings import EMPTY_STAR, clamp_rating, format_stars, rating_from_click, starting_rating

STAR_COLOR = "#f5b301"


def placeholder_poster(size: tuple[int, int] = Config.POSTER_SIZE) -> Image.Image:
    width, height = size
    image = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.rounded_rectangle((0, 0, width - 1, height - 1), radius=6, fill="#e0e0e0")

    # film strip glyph
    strip_w, strip_h = int(width * 0.6), int(height * 0.45)
    left, top = (width - strip_w) // 2, (height - strip_h) // 2
    draw.rectangle((left, top, left + strip_w, top + strip_h), fill="#5f5f5f")
    hole = max(2, strip_w // 10)
    for y in range(top + hole, top + strip_h - hole, hole * 2):
        draw.rectangle((left + hole // 2, y, left + hole // 2 + hole, y + hole), fill="#e0e0e0")
        draw.rectangle((left + strip_w - hole // 2 - hole, y, left + strip_w - hole // 2, y + hole), fill="#e0e0e0")
    return image


class PosterCache:
    def __init__(self, max_items: int = 8) -> None:
        self._items: dict[tuple[int, int], object] = {}
        self._order: list[tuple[int, int]] = []
        self._max_items = max_items

    def get(self, size: tuple[int, int] = Config.POSTER_SIZE):
        cached = self._items.get(size)
        if cached is not None:
            return cached
        image = placeholder_poster(size)
        poster = ctk.CTkImage(light_image=image, dark_image=image, size=size) if ctk else ImageTk.PhotoImage(image)
        self._put(size, poster)
        return poster

    def _put(self, key: tuple[int, int], value: object) -> None:
        if key not in self._items:
            self._order.append(key)
        self._items[key] = value
        while len(self._order) > self._max_items:
            oldest = self._order.pop(0)
            self._items.pop(oldest, None)


class StarRating(ctk.CTkFrame if ctk else ttk.Frame):
    """A row of clickable stars; the left half of a star picks a half step."""

    def __init__(
        self,
        parent: tk.Widget,
        rating: float = Config.DEFAULT_NEW_RATING,
        min_rating: float = Config.MIN_PICKER_RATING,
        star_count: int = Config.STAR_COUNT,
        allow_half: bool = True,
        star_size: int = 26,
        command: Callable[[float], None] | None = None,
    ) -> None:
        if ctk:
            super().__init__(parent, fg_color="transparent")
        else:
            super().__init__(parent)
        self.min_rating = min_rating
        self.star_count = star_count
        self.allow_half = allow_half
        self.command = command
        self._rating = starting_rating(rating, star_count)

        font = ("TkDefaultFont", star_size)
        self._stars: list[tk.Widget] = []
        for index in range(star_count):
            if ctk:
                star = ctk.CTkLabel(self, text=EMPTY_STAR, font=font, text_color=STAR_COLOR, width=star_size)
            else:
                star = tk.Label(self, text=EMPTY_STAR, font=font, fg=STAR_COLOR, cursor="hand2")
            star.pack(side="left")
            star.bind("<Button-1>", lambda e, i=index: self._on_click(i, e))
            self._stars.append(star)

        self.value_label = ctk.CTkLabel(self, text="") if ctk else ttk.Label(self, text="")
        self.value_label.pack(side="left", padx=(8, 0))
        self._render()

    def _on_click(self, index: int, event: tk.Event) -> None:
        width = event.widget.winfo_width()
        self.set(rating_from_click(index, event.x, width, self.min_rating, self.star_count, self.allow_half))
        if self.command:
            self.command(self._rating)

    def _render(self) -> None:
        text = format_stars(self._rating, self.star_count)
        for star, glyph in zip(self._stars, text):
            star.configure(text=glyph)
        self.value_label.configure(text=f"{self._rating:.1f}")

    def get(self) -> float:
        return self._rating

    def set(self, rating: float) -> None:
        self._rating = clamp_rating(rating, self.min_rating, self.star_count)
        self._render()
