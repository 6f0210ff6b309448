"""Command-line interface for receipt item extraction."""

import logging
import click
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple
import json
from concurrent.futures import ThreadPoolExecutor, as_completed
from tqdm import tqdm
import sys
from collections import Counter

from .parse_items import ReceiptItemParser
from .scanner import ReceiptScanner, ScanResult, RecognitionOutputError, DEFAULT_CONFIDENCE_THRESHOLD
from .review import ReviewQueue

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

INPUT_PATTERNS = ['*.txt', '*.TXT', '*.json', '*.JSON']


class BatchScanner:
    """Scan a folder of recognition outputs in parallel."""

    def __init__(self,
                 rules_path: Optional[Path] = None,
                 confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
                 max_workers: int = 4):
        """
        Initialize the batch scanner.

        Args:
            rules_path: Path to category rules file
            confidence_threshold: Engine confidence below which scans are flagged
            max_workers: Number of parallel workers
        """
        self.max_workers = max_workers
        self.scanner = ReceiptScanner(
            parser=ReceiptItemParser(rules_path),
            confidence_threshold=confidence_threshold,
        )
        self.review_queue = ReviewQueue({'ocr': self.scanner.confidence_threshold})

        self.stats = Counter({
            'total_files': 0,
            'processed': 0,
            'failed': 0,
            'items': 0,
        })

    def find_input_files(self, input_dir: Path, exclude: Optional[Path] = None) -> List[Path]:
        """Find all recognition output files under the input directory, except ``exclude``."""
        files = set()
        for pattern in INPUT_PATTERNS:
            files.update(input_dir.glob(f'**/{pattern}'))

        # A previous report written inside the input folder is not a recognition output
        if exclude is not None:
            excluded = exclude.resolve()
            files = {path for path in files if path.resolve() != excluded}

        input_files = sorted(files)
        logger.info(f"Found {len(input_files)} recognition output files in {input_dir}")
        return input_files

    def process_single_file(self, path: Path) -> Tuple[Optional[ScanResult], Optional[str]]:
        """Scan one file, returning the error message instead of raising."""
        try:
            return self.scanner.scan_file(path), None
        except RecognitionOutputError as e:
            logger.error(f"Failed to process {path}: {e}")
            return None, str(e)

    def process_batch(self, input_dir: Path, exclude: Optional[Path] = None) -> List[Dict[str, Any]]:
        """
        Scan every recognition output in the input directory.

        Args:
            input_dir: Directory containing .txt or .json outputs
            exclude: File to leave out, usually the report being written

        Returns:
            List of scan results as dictionaries, sorted by source
        """
        input_files = self.find_input_files(input_dir, exclude)
        self.stats['total_files'] = len(input_files)

        if not input_files:
            logger.warning("No recognition output files found!")
            return []

        results = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_file = {
                executor.submit(self.process_single_file, path): path
                for path in input_files
            }

            with tqdm(total=len(input_files), desc="Scanning receipts") as pbar:
                for future in as_completed(future_to_file):
                    path = future_to_file[future]
                    result, error = future.result()

                    if error:
                        self.stats['failed'] += 1
                        self.review_queue.add_item(str(path), f"processing failed: {error}")
                        results.append({'source': str(path), 'success': False,
                                        'items': [], 'error': error})
                    else:
                        self.stats['processed'] += 1
                        self.stats['items'] += len(result.items)
                        self.review_queue.add_from_scan(result)
                        results.append(result.to_dict())

                    pbar.update(1)
                    pbar.set_postfix({
                        'processed': self.stats['processed'],
                        'failed': self.stats['failed']
                    })

        logger.info(f"Batch complete. Processed: {self.stats['processed']}, "
                    f"Failed: {self.stats['failed']}, Items: {self.stats['items']}, "
                    f"Review: {len(self.review_queue.items)}")

        return sorted(results, key=lambda r: r['source'])


@click.group()
def cli():
    """Receipt items - extract inventory items from recognized receipt text."""
    pass


@cli.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--confidence', default=1.0, type=float,
              help='Recognition engine confidence (0-1 or 0-100)')
@click.option('--rules', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help='Path to category rules file')
@click.option('--pretty', is_flag=True, help='Indent JSON output')
def parse(source, confidence: float, rules: Optional[Path], pretty: bool):
    """
    Extract items from one recognized text (file or stdin).

    Example:
        receipt-items parse receipt.txt --confidence 0.87 --pretty
    """
    scanner = ReceiptScanner(parser=ReceiptItemParser(rules))
    name = getattr(source, 'name', None)
    result = scanner.scan(source.read(), confidence,
                          source=None if name in (None, '<stdin>') else name)

    click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2 if pretty else None))


@cli.command()
@click.option('--in', 'input_dir', required=True, type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Input directory containing recognition outputs (.txt/.json)')
@click.option('--out', 'output_file', required=True, type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file')
@click.option('--rules', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help='Path to category rules file')
@click.option('--max-workers', default=4, type=int,
              help='Maximum number of parallel workers')
@click.option('--confidence-threshold', default=DEFAULT_CONFIDENCE_THRESHOLD, type=float,
              envvar='OCR_CONFIDENCE_THRESHOLD', show_envvar=True,
              help='Flag scans whose engine confidence is below this (0-1 or 0-100)')
@click.option('--debug', is_flag=True, help='Enable debug output')
def batch(input_dir: Path,
          output_file: Path,
          rules: Optional[Path],
          max_workers: int,
          confidence_threshold: float,
          debug: bool):
    """
    Extract items from a folder of recognition outputs.

    Example:
        receipt-items batch --in ./ocr_json --out ./items.json
    """
    try:
        if debug:
            logging.getLogger().setLevel(logging.DEBUG)
            click.echo("🔍 Debug mode enabled - per-line parsing logs will be shown")

        logger.info(f"Input directory: {input_dir}")
        logger.info(f"Output file: {output_file}")

        processor = BatchScanner(
            rules_path=rules,
            confidence_threshold=confidence_threshold,
            max_workers=max_workers,
        )
        results = processor.process_batch(input_dir, exclude=output_file)

        output_file.parent.mkdir(parents=True, exist_ok=True)
        review_summary = processor.review_queue.get_summary()
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump({
                'results': results,
                'review': [item.to_dict() for item in processor.review_queue.items],
                'summary': {**dict(processor.stats), 'review': review_summary},
            }, f, ensure_ascii=False, indent=2)

        click.echo("\n" + "="*50)
        click.echo("SCAN SUMMARY")
        click.echo("="*50)
        click.echo(f"Total files found: {processor.stats['total_files']}")
        click.echo(f"Successfully processed: {processor.stats['processed']}")
        click.echo(f"Failed: {processor.stats['failed']}")
        click.echo(f"Items extracted: {processor.stats['items']}")
        click.echo(f"Scans needing review: {review_summary['total']}")
        click.echo(f"\nOutput: {output_file}")

        if processor.review_queue.items:
            click.echo(f"\n⚠️  {len(processor.review_queue.items)} scans need manual review!")
            for item in processor.review_queue.items[:10]:
                click.echo(f"  - {Path(item.source).name}: {item.reason}")
            if len(processor.review_queue.items) > 10:
                click.echo(f"  ... and {len(processor.review_queue.items) - 10} more")

    except Exception as e:
        logger.error(f"Batch scan failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
