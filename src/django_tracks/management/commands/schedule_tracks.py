"""Management command to pack talk proposals into conference tracks.

Usage::

    # Schedule the built-in sample proposals
    manage.py schedule_tracks

    # Schedule proposals from a TOML file
    manage.py schedule_tracks --proposals proposals.toml

    # Override the event name printed above the schedule
    manage.py schedule_tracks --proposals proposals.toml --event-name "PyCon Test"
"""

import argparse
import logging

from django.core.management.base import BaseCommand, CommandError

from django_tracks.scheduling import (
    ConferenceScheduler,
    ProposalSource,
    SchedulingError,
    StaticProposalSource,
    TomlProposalSource,
    TrackRenderer,
    VenueConfig,
)
from django_tracks.settings import get_config

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Schedule talk proposals into tracks and print the result."""

    help = "Schedule talk proposals into conference tracks"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register command-line arguments.

        Args:
            parser: The argument parser to add arguments to.
        """
        parser.add_argument(
            "--proposals",
            default=None,
            help="Path to a TOML proposals file. Uses the built-in sample proposals when omitted.",
        )
        parser.add_argument(
            "--event-name",
            default=None,
            dest="event_name",
            help="Event name printed above the schedule.",
        )

    def handle(self, **options: object) -> None:
        """Execute the scheduling command.

        Venue overrides in the proposals file are layered on top of the
        ``DJANGO_TRACKS['venue']`` settings.  Any scheduling or configuration
        failure is reported as a :class:`CommandError`.
        """
        try:
            config = get_config()
        except (TypeError, ValueError) as exc:
            raise CommandError(str(exc)) from exc
        venue = config.venue
        event_name = config.event_name

        path = options.get("proposals")
        source: ProposalSource
        try:
            if path:
                file_source = TomlProposalSource(str(path))
                venue = VenueConfig.from_mapping(file_source.venue_overrides, "venue", base=venue)
                event_name = file_source.event_name or event_name
                source = file_source
            else:
                source = StaticProposalSource()
            raw_proposals = source.proposals()
        except (FileNotFoundError, TypeError, ValueError) as exc:
            raise CommandError(str(exc)) from exc

        if options.get("event_name"):
            event_name = str(options["event_name"])

        logger.info("Scheduling %d proposals for %s", len(raw_proposals), event_name)
        try:
            tracks = ConferenceScheduler(venue).schedule(raw_proposals)
        except SchedulingError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(event_name)
        TrackRenderer().write(tracks, self.stdout)
        placed = sum(len(track.proposals) for track in tracks)
        self.stdout.write(self.style.SUCCESS(f"Scheduled {placed} proposals into {len(tracks)} tracks"))
