"""User-agent based app store redirects."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote

IOS_TOKENS = ("iphone", "ipad", "ipod")
IN_APP_TOKENS = (
    "fban",
    "fbav",
    "facebook",
    "instagram",
    "tiktok",
    "twitter",
    "snapchat",
    "pinterest",
    "gsa",
)


class Platform(Enum):
    ANDROID = "android"
    IOS = "ios"
    OTHER = "other"


@dataclass(frozen=True)
class AppStoreLinks:
    android_package: str
    ios_app_id: str
    ios_store_url: str
    fallback_url: str = "/homeowners"

    @property
    def android_store_url(self) -> str:
        return f"https://play.google.com/store/apps/details?id={self.android_package}"

    @property
    def android_intent_url(self) -> str:
        fallback = quote(self.android_store_url, safe="")
        return (
            f"intent://details?id={self.android_package}"
            f"#Intent;scheme=market;package=com.android.vending;"
            f"S.browser_fallback_url={fallback};end;"
        )

    @property
    def ios_store_scheme_url(self) -> str:
        return f"itms-apps://itunes.apple.com/app/id{self.ios_app_id}"


def detect_platform(user_agent: Optional[str]) -> Platform:
    ua = (user_agent or "").lower()
    if "android" in ua:
        return Platform.ANDROID
    if any(token in ua for token in IOS_TOKENS):
        return Platform.IOS
    return Platform.OTHER


def is_in_app_browser(user_agent: Optional[str]) -> bool:
    ua = (user_agent or "").lower()
    return any(token in ua for token in IN_APP_TOKENS)


def resolve_download_redirect(user_agent: Optional[str], links: AppStoreLinks) -> str:
    """Plain HTTPS store page for the device, or the fallback page."""
    platform = detect_platform(user_agent)
    if platform is Platform.ANDROID:
        return links.android_store_url
    if platform is Platform.IOS:
        return links.ios_store_url
    return links.fallback_url


def resolve_go_redirect(user_agent: Optional[str], links: AppStoreLinks) -> str:
    """
    Open the store app directly where the browser allows it.

    In-app browsers (social app web views) get the HTTPS store pages instead
    of the intent and itms-apps schemes.
    """
    platform = detect_platform(user_agent)
    in_app = is_in_app_browser(user_agent)

    if platform is Platform.ANDROID:
        return links.android_store_url if in_app else links.android_intent_url
    if platform is Platform.IOS:
        return links.ios_store_url if in_app else links.ios_store_scheme_url
    return links.fallback_url
