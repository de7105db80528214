from __future__ import annotations

import tkinter as tk
from tkinter import ttk

try:
    import customtkinter as ctk
except Exception:
    ctk = None

from config import Config
from forms import apply_details, build_new_movie, validate_title
from models import Movie
from widgets import StarRating


class _ModalDialog:
    def __init__(self, parent: tk.Misc, title: str) -> None:
        self.result: Movie | None = None
        self.window = ctk.CTkToplevel(parent) if ctk else tk.Toplevel(parent)
        self.window.title(title)
        self.window.transient(parent)
        self.window.protocol("WM_DELETE_WINDOW", self.cancel)
        self.window.bind("<Escape>", lambda _: self.cancel())

        self.body = ctk.CTkFrame(self.window) if ctk else ttk.Frame(self.window, padding=12)
        self.body.pack(fill="both", expand=True, padx=12, pady=12)

    def _label(self, parent: tk.Widget, text: str, **kwargs) -> tk.Widget:
        return ctk.CTkLabel(parent, text=text, **kwargs) if ctk else ttk.Label(parent, text=text, **kwargs)

    def _button(self, parent: tk.Widget, text: str, command) -> tk.Widget:
        return ctk.CTkButton(parent, text=text, command=command) if ctk else ttk.Button(parent, text=text, command=command)

    def _text_box(self, parent: tk.Widget, height: int) -> tk.Widget:
        if ctk:
            return ctk.CTkTextbox(parent, height=height * 22, width=360)
        return tk.Text(parent, height=height, width=44, wrap="word")

    def cancel(self) -> None:
        self.result = None
        self.window.destroy()

    def finish(self, movie: Movie) -> None:
        self.result = movie
        self.window.destroy()

    def show(self) -> Movie | None:
        self.window.wait_visibility()
        self.window.grab_set()
        self.window.focus_set()
        self.window.wait_window()
        return self.result


class AddMovieDialog(_ModalDialog):
    def __init__(self, parent: tk.Misc) -> None:
        super().__init__(parent, "Add Movie")

        self._label(self.body, "Title").pack(anchor="w")
        self.title_var = tk.StringVar()
        self.title_entry = ctk.CTkEntry(self.body, textvariable=self.title_var, width=360) if ctk else ttk.Entry(self.body, textvariable=self.title_var, width=44)
        self.title_entry.pack(fill="x", pady=(0, 2))
        self.error_label = ctk.CTkLabel(self.body, text="", text_color="#d32f2f") if ctk else tk.Label(self.body, text="", fg="#d32f2f")
        self.error_label.pack(anchor="w")

        self._label(self.body, "Description (optional)").pack(anchor="w")
        self.description_box = self._text_box(self.body, height=3)
        self.description_box.pack(fill="x", pady=(0, 8))

        row = ctk.CTkFrame(self.body, fg_color="transparent") if ctk else ttk.Frame(self.body)
        row.pack(fill="x", pady=4)
        self._label(row, "Rating:").pack(side="left")
        self.stars = StarRating(row, rating=Config.DEFAULT_NEW_RATING)
        self.stars.pack(side="left", padx=8)

        actions = ctk.CTkFrame(self.body, fg_color="transparent") if ctk else ttk.Frame(self.body)
        actions.pack(fill="x", pady=(12, 0))
        self._button(actions, "Add", self.submit).pack(side="right", padx=4)
        self._button(actions, "Cancel", self.cancel).pack(side="right", padx=4)

        self.title_entry.bind("<Return>", lambda _: self.submit())
        self.title_entry.focus_set()

    def submit(self) -> None:
        title = self.title_var.get()
        error = validate_title(title)
        if error:
            self.error_label.configure(text=error)
            return
        description = self.description_box.get("1.0", "end")
        self.finish(build_new_movie(title, description, self.stars.get()))


class MovieDetailsDialog(_ModalDialog):
    def __init__(self, parent: tk.Misc, movie: Movie) -> None:
        super().__init__(parent, movie.title)
        self.movie = movie

        if ctk:
            heading = self._label(self.body, movie.title, font=ctk.CTkFont(size=16, weight="bold"))
        else:
            heading = self._label(self.body, movie.title)
        heading.pack(anchor="w")
        if movie.description is not None:
            self._label(self.body, movie.description).pack(anchor="w", pady=(4, 12))

        self._label(self.body, "Rating:").pack(anchor="w")
        self.stars = StarRating(self.body, rating=movie.rating, star_size=32)
        self.stars.pack(anchor="w", pady=(0, 12))

        self._label(self.body, "Comment:").pack(anchor="w")
        self.comment_box = self._text_box(self.body, height=5)
        self.comment_box.insert("1.0", movie.comment or "")
        self.comment_box.pack(fill="both", expand=True, pady=(4, 12))

        self._button(self.body, "Save", self.save).pack()

    def save(self) -> None:
        comment = self.comment_box.get("1.0", "end")
        self.finish(apply_details(self.movie, self.stars.get(), comment))
