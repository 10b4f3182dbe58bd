"""
Pixel Garden - interactive window.
A tkinter front end: click the canvas to plant seeds and watch them bloom.
The garden engine does all the work; this file only wires widgets to it.
"""

import tkinter as tk
from tkinter import messagebox
from PIL import ImageTk

from config import AppConfig, SPEED_RANGE, BRUSH_RANGE
from garden import (
    AnimationDriver,
    CanvasBounds,
    FrameScheduler,
    Garden,
    InteractionSurface,
    ResizeEvents
)
from rendering import CanvasUnavailableError, ExportError, GardenCanvas, save_exported_image

BASE_DPI = 96.0


class TkFrameScheduler(FrameScheduler):
    """tk has no display-refresh hook; `after` at ~60 Hz stands in for it."""

    def __init__(self, widget: tk.Misc, interval_ms: int = 16):
        self.widget = widget
        self.interval_ms = interval_ms

    def request_frame(self, callback):
        return self.widget.after(self.interval_ms, callback)

    def cancel_frame(self, handle):
        self.widget.after_cancel(handle)


class GardenApp:

    def __init__(self, root, config: AppConfig, canvas: GardenCanvas):
        self.root = root
        self.root.title("Pixel Garden")
        self.config = config

        self.garden = Garden(config.garden)
        self.canvas = canvas
        self.resize_events = ResizeEvents()
        self.tk_image = None

        self.setup_ui()

        self.interaction = InteractionSurface(self.garden, self.canvas, self.canvas_bounds)
        self.unsubscribe = self.garden.subscribe(self.update_seed_count)
        self.driver = AnimationDriver(
            self.garden,
            self.canvas,
            TkFrameScheduler(self.root, config.frame_interval_ms),
            config=config.canvas,
            resize_events=self.resize_events,
            on_frame=lambda result: self.refresh_display()
        )

        self.root.protocol('WM_DELETE_WINDOW', self.close)
        self.driver.start()
        self.refresh_display()

    def setup_ui(self):
        main_frame = tk.Frame(self.root, bg='#03060c')
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Header buttons
        header = tk.Frame(main_frame, bg='#03060c')
        header.pack(fill=tk.X, pady=(0, 8))
        tk.Label(header, text="Pixel Garden", font=('Arial', 14, 'bold'),
                 fg='white', bg='#03060c').pack(side=tk.LEFT)
        tk.Button(header, text="Export", command=self.export, width=10).pack(side=tk.RIGHT, padx=2)
        tk.Button(header, text="Clear", command=self.clear, width=10).pack(side=tk.RIGHT, padx=2)
        tk.Button(header, text="Palette", command=self.reroll_palette, width=10).pack(side=tk.RIGHT, padx=2)
        self.pause_button = tk.Button(header, text="Pause", command=self.toggle_pause, width=10)
        self.pause_button.pack(side=tk.RIGHT, padx=2)

        # Canvas
        body = tk.Frame(main_frame, bg='#03060c')
        body.pack(fill=tk.BOTH, expand=True)

        self.tk_canvas = tk.Canvas(body, width=int(self.canvas.width), height=int(self.canvas.height),
                                   bg='#03060c', highlightthickness=0, cursor='crosshair')
        self.tk_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.image_item = self.tk_canvas.create_image(0, 0, anchor=tk.NW)

        self.tk_canvas.bind('<Button-1>', self.on_pointer_down)
        self.tk_canvas.bind('<Configure>', self.on_configure)

        # Controls
        controls = tk.Frame(body, padx=12)
        controls.pack(side=tk.RIGHT, fill=tk.Y)
        tk.Label(controls, text="Controls", font=('Arial', 11, 'bold')).pack(pady=(0, 10))

        tk.Label(controls, text="Speed:").pack()
        self.speed_slider = tk.Scale(controls, from_=SPEED_RANGE[0], to=SPEED_RANGE[1],
                                     resolution=0.1, orient=tk.HORIZONTAL, length=160,
                                     command=self.update_speed)
        self.speed_slider.set(self.garden.speed)
        self.speed_slider.pack()

        tk.Label(controls, text="Brush size:").pack(pady=(15, 0))
        self.brush_slider = tk.Scale(controls, from_=BRUSH_RANGE[0], to=BRUSH_RANGE[1],
                                     resolution=1, orient=tk.HORIZONTAL, length=160,
                                     command=self.update_brush)
        self.brush_slider.set(self.garden.brush)
        self.brush_slider.pack()

        self.grid_var = tk.BooleanVar(value=self.garden.show_grid)
        tk.Checkbutton(controls, text="Show grid", variable=self.grid_var,
                       command=self.update_grid).pack(pady=(15, 0))

        self.seed_label = tk.Label(controls, text="Seeds: 0", fg='gray')
        self.seed_label.pack(pady=(25, 0))
        tk.Label(controls, text="Click the canvas to plant", font=('Arial', 9), fg='gray').pack()

    def device_pixel_ratio(self) -> float:
        return max(1.0, round(self.root.winfo_fpixels('1i') / BASE_DPI, 2))

    def canvas_bounds(self) -> CanvasBounds:
        return CanvasBounds(
            left=self.tk_canvas.winfo_rootx(),
            top=self.tk_canvas.winfo_rooty(),
            width=self.tk_canvas.winfo_width(),
            height=self.tk_canvas.winfo_height()
        )

    # ==================== EVENTS ====================
    def on_pointer_down(self, event):
        self.interaction.on_pointer_down(event.x_root, event.y_root)

    def on_configure(self, event):
        self.resize_events.emit(event.width, event.height, self.device_pixel_ratio())
        self.refresh_display()

    def update_speed(self, val):
        self.garden.speed = float(val)

    def update_brush(self, val):
        self.garden.brush = float(val)

    def update_grid(self):
        self.garden.show_grid = self.grid_var.get()

    def update_seed_count(self, seeds):
        self.seed_label.config(text=f"Seeds: {len(seeds)}")

    # ==================== COMMANDS ====================
    def toggle_pause(self):
        running = self.garden.toggle_pause()
        self.pause_button.config(text="Pause" if running else "Resume")

    def reroll_palette(self):
        self.garden.reroll_palette()

    def clear(self):
        self.interaction.clear()
        self.refresh_display()

    def export(self):
        try:
            exported = self.interaction.export('png')
            save_exported_image(exported, self.config.export_dir)
        except ExportError as e:
            print(f"Export failed: {e}")
            messagebox.showerror("Export failed", str(e))

    def refresh_display(self):
        image = self.canvas.to_image()
        logical = (int(self.canvas.width), int(self.canvas.height))
        if image.size != logical:
            image = image.resize(logical)
        self.tk_image = ImageTk.PhotoImage(image)
        self.tk_canvas.itemconfigure(self.image_item, image=self.tk_image)

    def close(self):
        self.driver.dispose()
        self.unsubscribe()
        self.root.destroy()


def main(config: AppConfig = None):
    config = config or AppConfig()
    root = tk.Tk()

    try:
        canvas = GardenCanvas(config.canvas)
    except CanvasUnavailableError as e:
        print(f"Error: cannot render the garden: {e}")
        messagebox.showerror("Pixel Garden", f"Cannot render the garden:\n{e}")
        root.destroy()
        return None

    app = GardenApp(root, config, canvas)
    root.mainloop()
    return app


if __name__ == '__main__':
    main()
