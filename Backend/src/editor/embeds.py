"""
Fragments HTML inseres par l'editeur: video, podcast, lien Google Drive
et lecteur audio. Chaque fragment passe ensuite par sanitize_html.
"""
import html
import re
from urllib.parse import quote

from common.exceptions import EmbedNotRecognized
from common.i18n import message

YOUTUBE_RE = re.compile(r"(?:youtube\.com\/(?:[^\/]+\/.+\/|(?:v|e(?:mbed)?)\/|.*[?&]v=)|youtu\.be\/)([^\"&?\/\s]{11})")
VIMEO_RE = re.compile(r"vimeo\.com\/(?:video\/)?(\d+)")
SPOTIFY_RE = re.compile(r"(episode|show|track)\/([a-zA-Z0-9]+)")
DEEZER_RE = re.compile(r"(episode|podcast)\/(\d+)")
DRIVE_RE = re.compile(r"[-\w]{25,}")

DRIVE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V8z" />'
    '<polyline points="14 2 14 8 20 8" />'
    '<line x1="16" y1="13" x2="8" y2="13" />'
    '<line x1="16" y1="17" x2="8" y2="17" />'
    '<polyline points="10 9 9 9 8 9" />'
    "</svg>"
)


def youtube_id(url: str):
    match = YOUTUBE_RE.search(url or "")
    return match.group(1) if match else None


def vimeo_id(url: str):
    match = VIMEO_RE.search(url or "")
    return match.group(1) if match else None


def video_embed(url: str, lang: str = "fr") -> str:
    video = youtube_id(url)
    if video:
        return (
            '<div data-youtube-video="">'
            f'<iframe src="https://www.youtube.com/embed/{video}" width="640" height="360" '
            'allowfullscreen="true" class="mx-auto my-4 rounded-lg"></iframe>'
            "</div>"
        )
    video = vimeo_id(url)
    if video:
        return (
            '<div class="my-4 flex justify-center">'
            f'<iframe src="https://player.vimeo.com/video/{video}" width="640" height="360" frameborder="0" '
            'allow="autoplay; fullscreen; picture-in-picture" allowfullscreen class="rounded-lg"></iframe>'
            "</div>"
        )
    raise EmbedNotRecognized(message("embed.video", lang))


def podcast_embed(url: str, lang: str = "fr") -> str:
    url = (url or "").strip()
    src = None
    if "spotify.com" in url:
        match = SPOTIFY_RE.search(url)
        if match:
            src = f"https://open.spotify.com/embed/{match.group(1)}/{match.group(2)}"
            return (
                f'<div class="my-4"><iframe src="{src}" width="100%" height="152" frameborder="0" '
                'allow="autoplay; clipboard-write; encrypted-media; fullscreen; picture-in-picture" '
                'class="rounded-lg"></iframe></div>'
            )
    elif "podcasts.apple.com" in url:
        src = html.escape(url.replace("podcasts.apple.com", "embed.podcasts.apple.com", 1), quote=True)
        return (
            f'<div class="my-4"><iframe src="{src}" height="175" frameborder="0" '
            'sandbox="allow-forms allow-popups allow-same-origin allow-scripts allow-top-navigation-by-user-activation" '
            'allow="autoplay *; encrypted-media *; clipboard-write" class="w-full rounded-lg"></iframe></div>'
        )
    elif "soundcloud.com" in url:
        src = (
            f"https://w.soundcloud.com/player/?url={quote(url, safe='')}&color=%23ff5500&auto_play=false"
            "&hide_related=false&show_comments=true&show_user=true&show_reposts=false&show_teaser=true"
        )
        return (
            f'<div class="my-4"><iframe width="100%" height="166" scrolling="no" frameborder="no" '
            f'src="{html.escape(src, quote=True)}" class="rounded-lg"></iframe></div>'
        )
    elif "deezer.com" in url:
        match = DEEZER_RE.search(url)
        if match:
            src = f"https://widget.deezer.com/widget/dark/{match.group(1)}/{match.group(2)}"
            return (
                f'<div class="my-4"><iframe src="{src}" width="100%" height="152" frameborder="0" '
                'allow="encrypted-media; clipboard-write" class="rounded-lg"></iframe></div>'
            )
    raise EmbedNotRecognized(message("embed.podcast", lang))


def drive_embed(url: str, lang: str = "fr") -> str:
    match = DRIVE_RE.search(url or "")
    if not match:
        raise EmbedNotRecognized(message("embed.drive", lang))
    return (
        '<div class="my-4 p-4 border rounded-lg bg-muted/50">'
        f'<a href="https://drive.google.com/file/d/{match.group(0)}/view" target="_blank" rel="noopener noreferrer" '
        'class="flex items-center gap-2 text-primary hover:underline">'
        f"{DRIVE_ICON}Document Google Drive</a></div>"
    )


def audio_block(src: str, title: str = "", type: str = "audio/mpeg", lang: str = "fr") -> str:
    """Bloc lecteur audio (div[data-audio-block] + <audio>)."""
    if not src:
        raise EmbedNotRecognized(message("embed.audio", lang))
    src_attr = html.escape(src, quote=True)
    type_attr = html.escape(type or "audio/mpeg", quote=True)
    title = title or ""
    heading = f"🎧 {title}".strip()
    title_attr = f' data-title="{html.escape(title, quote=True)}"' if title else ""
    return (
        f'<div data-audio-block="true" data-src="{src_attr}"{title_attr} data-type="{type_attr}" '
        'class="my-4 p-4 bg-muted/50 rounded-lg">'
        f'<p class="font-medium mb-2">{html.escape(heading, quote=False)}</p>'
        '<audio controls="true" class="w-full">'
        f'<source src="{src_attr}" type="{type_attr}">'
        "Votre navigateur ne supporte pas l'audio."
        "</audio></div>"
    )


BUILDERS = {
    "video": video_embed,
    "podcast": podcast_embed,
    "drive": drive_embed,
}


def build_embed(kind: str, url: str, title: str = "", type: str = "audio/mpeg", lang: str = "fr") -> str:
    if kind == "audio":
        return audio_block(url, title, type, lang=lang)
    builder = BUILDERS.get(kind)
    if builder is None:
        raise EmbedNotRecognized(message("embed.kind", lang))
    return builder(url, lang=lang)
