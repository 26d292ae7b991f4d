import asyncio
import time
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from dnsscan.discovery.models import FormatOptions, ScanConfig, ScanSummary
from dnsscan.discovery.services import (HostResolver, HostScanner, PortScanner, ResultFormatter,
                                        ScanOrchestrator)


class DnsRangeScanner:
    def __init__(self, config: ScanConfig, format_options: FormatOptions = FormatOptions(),
                 host_resolver=None, port_scanner=None):
        self.config = config
        self._owns_resolver = host_resolver is None

        self.host_resolver = host_resolver or HostResolver()
        self.port_scanner = port_scanner or PortScanner()
        self.host_scanner = HostScanner(self.host_resolver, self.port_scanner)
        self.scan_orchestrator = ScanOrchestrator(self.host_scanner)
        self.formatter = ResultFormatter(format_options)

    async def run(self, emit=print) -> ScanSummary:
        """Scan the configured range, passing each output line to emit"""
        summary = ScanSummary()
        start_time = time.time()

        # One lookup thread per host so DNS queries are not queued behind a small pool
        executor = None
        if self._owns_resolver:
            executor = ThreadPoolExecutor(max_workers=max(1, self.config.host_count),
                                          thread_name_prefix="dnsscan-resolve")
            self.host_resolver.executor = executor

        try:
            async for outcome in self.scan_orchestrator.scan(self.config):
                summary.hosts_scanned += 1
                if outcome.resolution.succeeded:
                    summary.hosts_resolved += 1
                    summary.open_ports += len(outcome.open_ports)
                else:
                    summary.hosts_failed += 1
                if self.formatter.should_report(outcome, self.config):
                    summary.hosts_reported += 1

                for line in self.formatter.format(outcome, self.config):
                    emit(line)
        except asyncio.CancelledError:
            # Only a cancel() of this scan ends early with a partial summary
            if not self.scan_orchestrator.cancelled:
                raise
            logger.info("Scan cancelled after {} hosts", summary.hosts_scanned)
        finally:
            if executor is not None:
                self.host_resolver.executor = None
                executor.shutdown(wait=False)

        summary.duration_seconds = round(time.time() - start_time, 2)
        logger.info("Discovery finished: {} hosts reported, {} resolved, {} failed, {} open ports ({}s)",
                    summary.hosts_reported, summary.hosts_resolved, summary.hosts_failed,
                    summary.open_ports, summary.duration_seconds)
        return summary

    def run_scan(self, emit=print) -> ScanSummary:
        return asyncio.run(self.run(emit))

    def cancel(self):
        """Stop a running scan; run() then returns the summary collected so far"""
        self.scan_orchestrator.cancel()
