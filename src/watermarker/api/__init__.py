"""
High-level API for stamping marks onto images.

The main entry point is :py:class:`~watermarker.api.watermarker.Watermarker`,
which owns the original and working images and exposes the draw operations.

Key modules:

- :py:mod:`watermarker.api.watermarker`: Main Watermarker class
- :py:mod:`watermarker.api.params`: Draw parameters (DrawParams, Margin, Font)
- :py:mod:`watermarker.api.text`: Text-to-mark rendering
- :py:mod:`watermarker.api.pil_io`: PIL/Pillow image I/O utilities
- :py:mod:`watermarker.api.numpy_io`: NumPy array I/O utilities

Example usage::

    from watermarker import Watermarker

    marker = Watermarker.open('photo.jpg')
    marker.draw_text('DRAFT', opacity=0.3, position='center')
    marker.image.show()
"""
