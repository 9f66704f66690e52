from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .types import Deck, Slide
from .navigation import NavigationController


@dataclass(frozen=True)
class SlideThumbnail:
	index: int
	title: str
	preview: str


class PresentationStore:
	def __init__(self, navigation: Optional[NavigationController] = None):
		self.navigation = navigation or NavigationController()
		self._deck: Optional[Deck] = None
		self._artifact_url: Optional[str] = None
		self._used_fallback = False

	@property
	def deck(self) -> Optional[Deck]:
		return self._deck

	@property
	def has_presentation(self) -> bool:
		return self._deck is not None

	@property
	def artifact_url(self) -> Optional[str]:
		return self._artifact_url if self._deck is not None else None

	@property
	def used_fallback(self) -> bool:
		return self._used_fallback if self._deck is not None else False

	def replace(self, deck: Deck, artifact_url: Optional[str] = None, used_fallback: bool = False):
		self._deck, self._artifact_url, self._used_fallback = deck, artifact_url or None, bool(used_fallback)
		self.navigation.reset(len(deck.slides))

	def clear(self):
		self._deck, self._artifact_url, self._used_fallback = None, None, False
		self.navigation.detach()

	def current_slide(self) -> Optional[Slide]:
		index = self.navigation.current()
		if self._deck is None or index is None:
			return None
		return self._deck.slides[index]

	def overview(self) -> List[SlideThumbnail]:
		if self._deck is None:
			return []
		return [
			SlideThumbnail(index=i, title=s.title, preview=" ".join(s.content[:2]))
			for i, s in enumerate(self._deck.slides)
		]
