"""Example bookmarks shipped with the application. Never persisted or mutated."""

from ..models.bookmark import Bookmark
from ..utils.url_type import GENERIC, GITHUB

SEED_BOOKMARKS = (
    Bookmark(
        id='til-vite-aliases',
        title='Speed up your Vite projects with path aliases',
        url='https://vite.dev/guide/features.html#path-aliases',
        url_type=GENERIC,
        tags=['vite', 'frontend', 'productivity'],
        note='Quick reference for setting up @ alias in Vite config.',
        saved_at='2024-07-02T10:15:00.000Z',
    ),
    Bookmark(
        id='article-css-clamp',
        title='Responsive typography with clamp()',
        url='https://web.dev/min-max-clamp/',
        url_type=GENERIC,
        tags=['css', 'design'],
        note='Explains how to use clamp() for type scales that adapt to viewport.',
        saved_at='2024-08-15T08:02:00.000Z',
    ),
    Bookmark(
        id='doc-aria-patterns',
        title='ARIA Authoring Practices Guide',
        url='https://www.w3.org/WAI/ARIA/apg/',
        url_type=GENERIC,
        tags=['accessibility', 'reference'],
        note='Great resource for common widget patterns; check combobox behavior.',
        saved_at='2024-05-28T21:30:00.000Z',
    ),
    Bookmark(
        id='repo-zustand',
        title='Zustand State Management',
        url='https://github.com/pmndrs/zustand',
        url_type=GITHUB,
        tags=['state', 'react'],
        note='Simple global store; consider for future state sharing if app grows.',
        saved_at='2024-09-04T14:45:00.000Z',
    ),
    Bookmark(
        id='blog-dark-mode-css',
        title='Prefers-color-scheme: Dark Mode in CSS',
        url='https://css-tricks.com/dark-mode/',
        url_type=GENERIC,
        tags=['css', 'ui'],
        note='Covers toggles and system preference detection; useful for theme switch.',
        saved_at='2024-06-11T12:10:00.000Z',
    ),
)
