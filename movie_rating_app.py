from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, ttk

try:
    import customtkinter as ctk
except Exception:
    ctk = None

from config import Config
from data_store import MovieRepository, PreferencesStore
from dialogs import AddMovieDialog, MovieDetailsDialog
from models import Movie
from movie_list import MovieListController
from ratings import format_stars
from widgets import STAR_COLOR, PosterCache

logger = logging.getLogger(__name__)


class MovieRatingApp:
    def __init__(self, root: tk.Tk, repo: MovieRepository | None = None) -> None:
        self.root = root
        self.root.title(Config.WINDOW_TITLE)
        self.root.geometry(Config.WINDOW_GEOMETRY)

        self.repo = repo or MovieRepository(PreferencesStore(Config.PREFS_FILE))
        self.settings = self.repo.load_settings()
        self.controller = MovieListController(self.repo)
        self.posters = PosterCache()
        self.row_widgets: list[tk.Widget] = []

        self._build_ui()
        self._bind_shortcuts()
        self._start_loading()

    def _build_ui(self) -> None:
        use_dark = bool(self.settings.get("dark_mode", Config.DEFAULT_DARK_MODE))
        if ctk:
            ctk.set_appearance_mode("dark" if use_dark else "light")
            ctk.set_default_color_theme("blue")

        outer = ctk.CTkFrame(self.root) if ctk else ttk.Frame(self.root, padding=10)
        outer.pack(fill="both", expand=True)

        toolbar = ctk.CTkFrame(outer) if ctk else ttk.Frame(outer)
        toolbar.pack(fill="x", padx=12, pady=12)

        title_font = ctk.CTkFont(size=18, weight="bold") if ctk else ("TkDefaultFont", 14, "bold")
        header = ctk.CTkLabel(toolbar, text="Movie Ratings", font=title_font) if ctk else ttk.Label(toolbar, text="Movie Ratings", font=title_font)
        header.pack(side="left", padx=8)

        btn = ctk.CTkButton if ctk else ttk.Button
        self.add_btn = btn(toolbar, text="+ Add", command=self.add_movie)
        self.add_btn.pack(side="right", padx=4)
        self.theme_btn = btn(toolbar, text="Toggle Theme", command=self.toggle_theme)
        self.theme_btn.pack(side="right", padx=4)
        self.reset_btn = btn(toolbar, text="Reset Samples", command=self.reset_movies)
        self.reset_btn.pack(side="right", padx=4)
        self.sort_btn = btn(toolbar, text="Sort by Rating", command=self.sort_movies)
        self.sort_btn.pack(side="right", padx=4)

        self.loading_label = ctk.CTkLabel(outer, text="Loading...") if ctk else ttk.Label(outer, text="Loading...")
        self.progress = ttk.Progressbar(outer, mode="indeterminate")

        if ctk:
            self.list_frame = ctk.CTkScrollableFrame(outer)
        else:
            self.list_frame = self._scrollable_frame(outer)

        self.status = ctk.CTkLabel(outer, text="") if ctk else ttk.Label(outer, text="")
        self.status.pack(side="bottom", fill="x", padx=12, pady=(0, 8))

    def _scrollable_frame(self, parent: tk.Widget) -> ttk.Frame:
        holder = ttk.Frame(parent)
        canvas = tk.Canvas(holder, highlightthickness=0)
        canvas.pack(side="left", fill="both", expand=True)
        scrollbar = ttk.Scrollbar(holder, orient="vertical", command=canvas.yview)
        scrollbar.pack(side="right", fill="y")
        canvas.configure(yscrollcommand=scrollbar.set)
        inner = ttk.Frame(canvas)
        window = canvas.create_window((0, 0), window=inner, anchor="nw")
        inner.bind("<Configure>", lambda _: canvas.configure(scrollregion=canvas.bbox("all")))
        canvas.bind("<Configure>", lambda e: canvas.itemconfigure(window, width=e.width))
        canvas.bind_all("<MouseWheel>", lambda e: canvas.yview_scroll(int(-1 * (e.delta / 120)), "units"))
        inner.holder = holder
        return inner

    def _list_widget(self) -> tk.Widget:
        return getattr(self.list_frame, "holder", self.list_frame)

    def _bind_shortcuts(self) -> None:
        self.root.bind("<Control-n>", lambda _: self.add_movie())
        self.root.bind("<Control-s>", lambda _: self.sort_movies())
        self.root.bind("<Control-r>", lambda _: self.reset_movies())

    def _set_actions_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        for button in (self.add_btn, self.sort_btn, self.reset_btn):
            button.configure(state=state)

    def _start_loading(self) -> None:
        self._set_actions_enabled(False)
        self.loading_label.pack(pady=(40, 8))
        self.progress.pack(fill="x", padx=120)
        self.progress.start(12)

        future = self.controller.start_loading()
        future.add_done_callback(lambda f: self.root.after(0, self._finish_loading, f.result()))

    def _finish_loading(self, movies: list[Movie]) -> None:
        self.controller.finish_loading(movies)
        self.progress.stop()
        self.progress.pack_forget()
        self.loading_label.pack_forget()
        self._list_widget().pack(fill="both", expand=True, padx=12, pady=6)
        self._set_actions_enabled(True)
        self.refresh_movie_list()

    def refresh_movie_list(self) -> None:
        for widget in self.row_widgets:
            widget.destroy()
        self.row_widgets.clear()

        movies = self.controller.movies
        if not movies:
            empty = ctk.CTkLabel(self.list_frame, text="No movies. Tap + to add.") if ctk else ttk.Label(self.list_frame, text="No movies. Tap + to add.")
            empty.pack(pady=40)
            self.row_widgets.append(empty)
        for movie in movies:
            row = self._build_row(self.list_frame, movie)
            row.pack(fill="x", padx=4, pady=4)
            self.row_widgets.append(row)

        count = len(movies)
        self.status.configure(text=f"{count} movie{'s' if count != 1 else ''}")

    def _build_row(self, parent: tk.Widget, movie: Movie) -> tk.Widget:
        frame = ctk.CTkFrame(parent, corner_radius=8) if ctk else ttk.Frame(parent, relief="ridge", borderwidth=1, padding=6)

        poster = self.posters.get(Config.POSTER_SIZE)
        poster_label = ctk.CTkLabel(frame, image=poster, text="") if ctk else ttk.Label(frame, image=poster)
        poster_label.pack(side="left", padx=(8, 12), pady=8)

        text = ctk.CTkFrame(frame, fg_color="transparent") if ctk else ttk.Frame(frame)
        text.pack(side="left", fill="x", expand=True)

        if ctk:
            ctk.CTkLabel(text, text=movie.title, font=ctk.CTkFont(weight="bold"), anchor="w").pack(fill="x")
            if movie.description is not None:
                ctk.CTkLabel(text, text=movie.description, anchor="w").pack(fill="x")
            ctk.CTkLabel(text, text=f"{format_stars(movie.rating)}  {movie.rating:.1f}", text_color=STAR_COLOR, anchor="w").pack(fill="x", pady=(4, 0))
            if movie.comment:
                ctk.CTkLabel(text, text=f"Comment: {movie.comment}", font=ctk.CTkFont(size=12, slant="italic"), anchor="w", wraplength=420, justify="left").pack(fill="x", pady=(4, 0))
        else:
            ttk.Label(text, text=movie.title, font=("TkDefaultFont", 10, "bold")).pack(anchor="w")
            if movie.description is not None:
                ttk.Label(text, text=movie.description).pack(anchor="w")
            tk.Label(text, text=f"{format_stars(movie.rating)}  {movie.rating:.1f}", fg=STAR_COLOR).pack(anchor="w", pady=(4, 0))
            if movie.comment:
                ttk.Label(text, text=f"Comment: {movie.comment}", font=("TkDefaultFont", 9, "italic"), wraplength=420).pack(anchor="w", pady=(4, 0))

        delete = ctk.CTkButton(frame, text="Delete", width=70, command=lambda m=movie: self.delete_movie(m)) if ctk else ttk.Button(frame, text="Delete", command=lambda m=movie: self.delete_movie(m))
        delete.pack(side="right", padx=8)

        clickable = [frame, poster_label, text, *text.winfo_children()]
        for widget in clickable:
            widget.bind("<Button-1>", lambda _e, m=movie: self.show_details(m))
        return frame

    def add_movie(self) -> None:
        if not self.controller.state.ready:
            return
        movie = AddMovieDialog(self.root).show()
        if movie is not None and self.controller.add(movie):
            self.refresh_movie_list()

    def delete_movie(self, movie: Movie) -> None:
        if not messagebox.askyesno("Remove movie?", f'Delete "{movie.title}" from list?', parent=self.root):
            return
        if self.controller.delete(movie.id):
            self.refresh_movie_list()

    def show_details(self, movie: Movie) -> None:
        updated = MovieDetailsDialog(self.root, movie).show()
        if updated is not None and self.controller.update(updated):
            self.refresh_movie_list()

    def sort_movies(self) -> None:
        if not self.controller.state.ready:
            return
        if self.controller.sort():
            self.refresh_movie_list()

    def reset_movies(self) -> None:
        if not self.controller.state.ready:
            return
        self.controller.reset()
        self.refresh_movie_list()

    def toggle_theme(self) -> None:
        if not ctk:
            return
        dark = ctk.get_appearance_mode() != "Dark"
        ctk.set_appearance_mode("dark" if dark else "light")
        self.settings["dark_mode"] = dark
        self.repo.save_settings(self.settings)
        logger.info("Switched to %s theme", "dark" if dark else "light")

    def close(self) -> None:
        self.controller.close()
        self.root.destroy()


def main() -> None:
    logging.basicConfig(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)
    root = ctk.CTk() if ctk else tk.Tk()
    app = MovieRatingApp(root)
    root.protocol("WM_DELETE_WINDOW", app.close)
    root.mainloop()


if __name__ == "__main__":
    main()
