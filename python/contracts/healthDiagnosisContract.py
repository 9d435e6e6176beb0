import smartpy as sp

# The default diagnosis fee: 0.01 tez
DEFAULT_FEE_MUTEZ = 10000
DEFAULT_FEE = sp.mutez(DEFAULT_FEE_MUTEZ)

# The contract error messages
INSUFFICIENT_PAYMENT = "HealthDiagnosis: insufficient payment"
NOT_OWNER = "HealthDiagnosis: not owner"
TEZ_TRANSFER = "HealthDiagnosis: tez transfer"


@sp.module
def main():
    # The information stored for each submitted diagnosis
    diagnosis_record: type = sp.record(
        # The reported symptoms
        symptoms=sp.string,
        # The diagnosis result
        result=sp.string,
        # The time when the diagnosis was submitted
        timestamp=sp.timestamp).layout(("symptoms", ("result", "timestamp")))

    # The event emitted for each submitted diagnosis
    diagnosed_event: type = sp.record(
        submitter=sp.address,
        symptoms=sp.string,
        result=sp.string).layout(("submitter", ("symptoms", "result")))

    # The event emitted when the owner changes the fee
    fee_updated_event: type = sp.record(
        old_fee=sp.mutez,
        new_fee=sp.mutez).layout(("old_fee", "new_fee"))

    class HealthDiagnosis(sp.Contract):
        """This contract implements a pay-per-use diagnosis ledger.

        Any user can submit a symptoms/diagnosis pair paying the contract
        fee. The diagnosis is recorded against the user address. The contract
        owner can update the fee and withdraw the collected tez.

        """

        def __init__(self, owner, fee):
            """Initializes the contract.

            """
            # The contract owner
            self.data.owner = sp.cast(owner, sp.address)

            # The minimum tez amount required to submit a diagnosis
            self.data.fee = sp.cast(fee, sp.mutez)

            # The big map with the diagnosis history of each user. The inner
            # map keys are the record positions in the user history
            self.data.records = sp.cast(
                sp.big_map(),
                sp.big_map[sp.address, sp.map[sp.nat, diagnosis_record]])

        @sp.private(with_storage="read-only")
        def check_is_owner(self):
            """Checks that the address that called the entry point is the
            contract owner.

            """
            assert sp.sender == self.data.owner, "HealthDiagnosis: not owner"

        @sp.private(with_storage="read-only")
        def check_no_tez_transfer(self):
            """Checks that no tez were transferred in the operation.

            """
            assert sp.amount == sp.mutez(0), "HealthDiagnosis: tez transfer"

        @sp.entrypoint
        def submit_diagnosis(self, symptoms, result):
            """Records a new diagnosis in the sender history.

            The complete transferred amount stays in the contract, even if it
            is larger than the fee.

            """
            # Define the input parameter data types
            sp.cast(symptoms, sp.string)
            sp.cast(result, sp.string)

            # Check that the sender paid at least the contract fee
            assert sp.amount >= self.data.fee, "HealthDiagnosis: insufficient payment"

            # Add the sender to the records big map if it's their first diagnosis
            if not sp.sender in self.data.records:
                self.data.records[sp.sender] = {}

            # Append the diagnosis at the end of the sender history
            history = self.data.records[sp.sender]
            history[sp.len(history)] = sp.record(
                symptoms=symptoms,
                result=result,
                timestamp=sp.now)
            self.data.records[sp.sender] = history

            # Inform the indexers about the new diagnosis
            sp.emit(
                sp.cast(
                    sp.record(
                        submitter=sp.sender,
                        symptoms=symptoms,
                        result=result),
                    diagnosed_event),
                tag="Diagnosed",
                with_type=True)

        @sp.entrypoint
        def set_fee(self, new_fee):
            """Updates the diagnosis fee.

            """
            # Define the input parameter data type
            sp.cast(new_fee, sp.mutez)

            # Check that the owner executed the entry point
            self.check_is_owner()

            # Check that no tez have been transferred
            self.check_no_tez_transfer()

            # Inform the indexers about the fee change
            sp.emit(
                sp.cast(
                    sp.record(old_fee=self.data.fee, new_fee=new_fee),
                    fee_updated_event),
                tag="FeeUpdated",
                with_type=True)

            # Set the new fee
            self.data.fee = new_fee

        @sp.entrypoint
        def withdraw(self):
            """Sends all the tez collected by the contract to the owner.

            """
            # Check that the owner executed the entry point
            self.check_is_owner()

            # Check that no tez have been transferred
            self.check_no_tez_transfer()

            # Transfer the contract balance if there is something to transfer
            if sp.balance > sp.mutez(0):
                sp.send(self.data.owner, sp.balance)

        @sp.onchain_view()
        def get_records(self, user):
            """Returns the diagnosis history of a given user address.

            """
            # Define the input parameter data type
            sp.cast(user, sp.address)

            # Return an empty history if the user never submitted a diagnosis
            if user in self.data.records:
                return self.data.records[user]
            else:
                return sp.cast({}, sp.map[sp.nat, diagnosis_record])

        @sp.onchain_view()
        def get_record_count(self, user):
            """Returns the number of diagnoses submitted by a given user
            address.

            """
            # Define the input parameter data type
            sp.cast(user, sp.address)

            if user in self.data.records:
                return sp.len(self.data.records[user])
            else:
                return sp.nat(0)

        @sp.onchain_view()
        def get_fee(self):
            """Returns the diagnosis fee.

            """
            return self.data.fee

        @sp.onchain_view()
        def get_owner(self):
            """Returns the contract owner address.

            """
            return self.data.owner
