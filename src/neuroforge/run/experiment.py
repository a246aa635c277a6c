"""
Experiment Module

This module defines the Experiment class, with built-in support for CPU-based
parallelization using joblib.

An experiment represents a collection of multiple independent trials (runs),
used to gather statistical data about a learning algorithm's performance.
"""

import logging
from joblib     import Parallel, delayed
from statistics import mean
from typing     import Type

from neuroforge.run.config import Config
from neuroforge.run.trial  import Trial

logger = logging.getLogger(__name__)


class Experiment:
    """
    A collection of independent trials of the same training problem.

    Each trial builds and trains its own network; the experiment aggregates the
    results (success rate, epochs needed, final errors). Trials of a seeded
    configuration get consecutive seeds (seed, seed + 1, ...), so they differ
    from each other but the experiment as a whole is reproducible.

    Subclasses can override:
    - _prepare_trial(trial, trial_number): Configure each trial before execution
    - _extract_trial_results(trial, trial_number): Extract results after trial completes
    - _analyze_trial_results(results): Process individual trial results
    - _final_report(): Produce aggregated report for entire experiment

    Public Attributes:
        success_counter: Number of successful trials
        number_epochs:   Epochs used by each successful trial
        final_errors:    Final error of every trial

    Public Methods:
        run(num_jobs=1): Execute the complete experiment

    Parallelization (num_jobs):
         1:  Serial trial execution (no parallelization)
        >1:  Use specified number of parallel workers for trials
        -1:  Use all available CPU cores for trials
    """

    def __init__(self, trial_class: Type[Trial], num_trials: int, config: Config,
                 *args, **kwargs):
        """
        Parameters:
            trial_class: the class describing the trials in this experiment
            num_trials:  number of trials in this experiment
            config:      configuration parameters
            *args:       positional arguments to pass to trial class constructor
            **kwargs:    keyword arguments to pass to trial class constructor
        """
        self._num_trials : int         = num_trials
        self._trial_class: Type[Trial] = trial_class
        self._config     : Config      = config
        self._trial_args               = args
        self._trial_kwargs             = kwargs

        self.success_counter: int         = 0
        self.number_epochs  : list[int]   = []
        self.final_errors   : list[float] = []

    def _reset(self) -> None:
        """
        Reset experiment state before starting a new run.
        """
        self.success_counter = 0
        self.number_epochs   = []
        self.final_errors    = []

    def run(self, num_jobs: int = 1, backend: str | None = None) -> list[dict]:
        """
        Run the experiment.

        Parameters:
            num_jobs: Number of parallel workers for running trials
                       1 = serial trial execution (default)
                      -1 = use all available CPU cores
                      >1 = use specified number of workers
            backend:  joblib backend for parallel runs (None = joblib's default)

        Returns:
            The results extracted from each trial, in trial order
        """
        # Reset the state at the beginning of each new experiment
        self._reset()

        if num_jobs == 1:
            results = [self._run_trial(n) for n in range(1, self._num_trials + 1)]
        else:
            results = Parallel(num_jobs, backend=backend)(
                delayed(self._run_trial)(n) for n in range(1, self._num_trials + 1)
            )

        for r in results:
            self._analyze_trial_results(r)
        self._final_report()

        return results

    def _run_trial(self, trial_number: int) -> dict:
        """
        Prepare, run and extract the results of one trial.

        Parameters:
            trial_number: The trial number (1-indexed)
        """
        trial = self._trial_class(*self._trial_args, config=self._config, suppress_output=True, **self._trial_kwargs)

        self._prepare_trial(trial, trial_number)
        trial.run()

        return self._extract_trial_results(trial, trial_number)

    def _prepare_trial(self, trial: Trial, trial_number: int) -> None:
        """
        Configure a trial before it runs. The default gives every trial of a
        seeded configuration its own seed.
        """
        if self._config.seed is not None:
            trial.seed = self._config.seed + trial_number - 1
        logger.debug("Starting trial %03d of %d", trial_number, self._num_trials)

    def _extract_trial_results(self, trial: Trial, trial_number: int) -> dict:
        """
        Extract relevant results at the end of a trial.
        Derived implementations should call this method and extend its result.
        """
        return {
            "trial_number" : trial_number,
            "number_epochs": trial.epoch_counter,
            "final_error"  : trial.errors[-1] if trial.errors else None,
            "success"      : not trial.failed,
        }

    def _analyze_trial_results(self, results: dict) -> None:
        """
        Update the statistics with the results of one trial.
        Derived implementations should call this method.
        """
        if results["final_error"] is not None:
            self.final_errors.append(results["final_error"])

        if results["success"]:
            self.success_counter += 1
            self.number_epochs.append(results["number_epochs"])

    def _final_report(self) -> None:
        """
        Produce the final report, aggregating the data obtained from each trial.
        """
        logger.info("Experiment finished: %d of %d trials successful", self.success_counter, self._num_trials)
        if self.number_epochs:
            logger.info("Average number of epochs of successful trials: %.1f", mean(self.number_epochs))
        if self.final_errors:
            logger.info("Average final error: %.6f", mean(self.final_errors))
