import csv

from . import canvas
from . import frame
from . import render_params


def record_frame(scene, frame_index=0, size=render_params.canvas_size):
    """ Return list of (name, args) of all canvas calls of a frame """
    recorder = canvas.RecordingCanvas(*size)
    frame.draw_frame(scene, frame_index, recorder)
    return recorder.calls


def render_calls(scene, filename, frame_index=0):
    with open(filename, "w", newline="") as fp:
        writer = csv.writer(fp)
        writer.writerow(["index", "call", "args"])
        writer.writerows([i, name, " ".join(str(arg) for arg in args)]
                         for i, (name, args) in enumerate(record_frame(scene, frame_index)))
