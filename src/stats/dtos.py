from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubmissionStats:
    total: int = 0
    # table number -> submissions; tables without submissions have no key
    by_table: dict[int, int] = field(default_factory=dict)

    @property
    def tables(self) -> list[int]:
        return sorted(self.by_table)


@dataclass(frozen=True)
class RSVPStats:
    total: int = 0
    attending: int = 0
    not_attending: int = 0
    maybe: int = 0
    # sum of guest_count over attending responses only
    total_guests: int = 0
